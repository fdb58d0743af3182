from src.utils.rounding import pct2, round2, round_half_up, to_fixed

def test_round_half_up_ties_toward_positive_infinity():
    assert round_half_up(2.5) == 3.0
    assert round_half_up(-2.5) == -2.0
    assert round_half_up(-2.6) == -3.0
    assert round_half_up(0.49) == 0.0

def test_round2_multiplies_first():
    assert round2(1.005) == 1.0   # 1.005 * 100 == 100.49999999999999
    assert round2(12.345678) == 12.35
    assert round2(-0.125) == -0.12

def test_pct2():
    assert pct2(200, 1000) == 20.0
    assert pct2(-1, 3) == -33.33

def test_to_fixed_half_away_from_zero_on_exact_value():
    assert to_fixed(5.25, 1) == "5.3"
    assert to_fixed(0.125, 2) == "0.13"
    assert to_fixed(1.005, 2) == "1.00"
    assert to_fixed(-5.25, 1) == "-5.3"
    assert to_fixed(7.0, 2) == "7.00"
