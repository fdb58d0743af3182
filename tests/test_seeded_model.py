import json
from datetime import date
from pathlib import Path

import numpy as np
import pytest

from src.constants.companies import COMPANIES
from src.constants.market import NEWS_SENTIMENT_PATTERN, NEWS_SOURCES, QUARTERS
from src.market_io import validate_stock_data
from src.model_impl.seeded_model import (
    DRAW_ORDER_VERSION, SeededModel, decide_action, generate_stock_data, sentiment_direction,
)
from src.tools.company_search import get_company
from src.utils.market_calendar import day_label

TODAY = date(2026, 10, 19)

def test_analysis_is_deterministic(tcs):
    assert generate_stock_data(tcs, TODAY) == generate_stock_data(tcs, TODAY)
    assert SeededModel(TODAY).analyze(tcs) == generate_stock_data(tcs, TODAY)

def test_price_and_history(tcs):
    d = generate_stock_data(tcs, TODAY)
    assert 500 < d["current_price"] <= 5000
    hist = d["price_history"]
    assert len(hist) == 30
    floor = 0.85 * d["current_price"]
    assert all(p["price"] >= floor - 0.01 for p in hist)
    assert hist[-1]["label"] == day_label(TODAY)
    assert hist[0]["label"] == "20 Sep"

def test_quarterly_results(tcs):
    q = generate_stock_data(tcs, TODAY)["quarterly_results"]
    assert [r["quarter"] for r in q] == QUARTERS
    for r in q:
        assert 1000 <= r["revenue"] <= 16000
        assert r["revenue"] * 0.05 - 1 <= r["profit"] <= r["revenue"] * 0.30 + 1
        assert 0 <= r["eps"] <= 50

def test_news_layout(tcs):
    news = generate_stock_data(tcs, TODAY)["news"]
    assert [n["sentiment"] for n in news] == NEWS_SENTIMENT_PATTERN
    assert [n["source"] for n in news] == NEWS_SOURCES
    assert all(n["headline"].startswith(tcs["name"] + " ") for n in news)
    assert all(n["relative_time"].endswith("h ago") for n in news)

@pytest.mark.parametrize("company", COMPANIES, ids=lambda c: c["symbol"])
def test_invariants_for_every_listed_company(company):
    d = generate_stock_data(company, TODAY)
    validate_stock_data(d)
    ai, s, dec = d["ai_analysis"], d["sentiment"], d["decision"]
    assert ai["buy_pct"] + ai["sell_pct"] + ai["hold_pct"] == 100
    assert 25 <= ai["buy_pct"] <= 75
    assert ai["hold_pct"] >= 0
    assert dec["action"] == decide_action(ai["buy_pct"], ai["sell_pct"], ai["hold_pct"])
    assert 0.55 <= dec["confidence"] <= 0.95
    assert 0.5 <= s["confidence"] <= 1.0
    assert -1 <= s["avg_sentiment"] <= 1
    assert s["direction"] == sentiment_direction(s["avg_sentiment"])
    assert d["day_low"] <= d["current_price"] <= d["day_high"]
    assert d["volume"].endswith("M") and d["market_cap"].startswith("₹")
    assert ai["news_summary"] == [n["headline"] for n in d["news"]]

def test_explanation_mentions_split(tcs):
    d = generate_stock_data(tcs, TODAY)
    ai = d["ai_analysis"]
    expl = d["decision"]["explanation"]
    assert expl.startswith(f"The {d['decision']['action']} recommendation for {tcs['name']}")
    assert f"{ai['buy_pct']}% buy / {ai['sell_pct']}% sell / {ai['hold_pct']}% hold" in expl
    assert f"{ai['holding_period']}-term" in expl

def test_decide_action_tie_break():
    assert decide_action(40, 40, 20) == "BUY"
    assert decide_action(40, 20, 40) == "BUY"
    assert decide_action(20, 40, 40) == "SELL"
    assert decide_action(20, 30, 50) == "HOLD"

def test_sentiment_direction_thresholds():
    assert sentiment_direction(0.21) == "POSITIVE"
    assert sentiment_direction(0.2) == "NEUTRAL"
    assert sentiment_direction(-0.2) == "NEUTRAL"
    assert sentiment_direction(-0.21) == "NEGATIVE"

def test_empty_symbol_rejected():
    with pytest.raises(ValueError):
        generate_stock_data({"name": "Nameless", "symbol": "", "exchange": "NSE", "sector": "IT"}, TODAY)

# Reference figures for the v1 draw order, produced by the dashboard's own formulas.
GOLDEN = json.loads((Path(__file__).parent / "data" / "seeded_analysis.json").read_text(encoding="utf-8"))

@pytest.mark.parametrize("symbol", sorted(GOLDEN))
def test_matches_reference_figures(symbol):
    assert DRAW_ORDER_VERSION == 1
    expected = dict(GOLDEN[symbol])
    history = expected.pop("history")
    d = generate_stock_data(get_company(symbol), TODAY)
    assert [p["price"] for p in d["price_history"]] == history
    assert [p["label"] for p in d["price_history"]][::29] == ["20 Sep", "19 Oct"]
    got = {k: v for k, v in d.items() if k not in ("company", "price_history")}
    for key in expected:
        assert got[key] == expected[key], key
    assert set(got) == set(expected)

def test_split_holds_for_arbitrary_symbols():
    rng = np.random.default_rng(2024)
    alphabet = list("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789&-")
    for _ in range(2000):
        sym = "".join(rng.choice(alphabet, size=int(rng.integers(1, 12))))
        ai = generate_stock_data({"name": sym, "symbol": sym, "exchange": "NSE", "sector": "IT"}, TODAY)["ai_analysis"]
        assert ai["buy_pct"] + ai["sell_pct"] + ai["hold_pct"] == 100, sym
        assert ai["hold_pct"] >= 0 and ai["sell_pct"] >= 10, sym
