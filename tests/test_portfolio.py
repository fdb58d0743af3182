import pytest
from jsonschema import ValidationError

from src.constants.market import CASH_BALANCE, DEFAULT_PORTFOLIO_SYMBOLS
from src.tools import portfolio

DAY = "Mon Oct 19 2026"

def _holding(**kw):
    h = {"symbol": "X", "company_name": "X Limited", "exchange": "NSE", "sector": "IT",
         "quantity": 10, "avg_buy_price": 100}
    h.update(kw)
    return h

@pytest.fixture
def quote_120(monkeypatch):
    monkeypatch.setattr("src.tools.quotes.get_quote",
                        lambda symbol, date_key=None: {"price": 120.0, "change": 1.0, "change_pct": 0.84})

def test_enrich_computes_pl(quote_120):
    [row] = portfolio.enrich_holdings([_holding()])
    assert row["current_price"] == 120.0
    assert row["pl"] == 200.0
    assert row["pl_pct"] == 20.0
    assert row["symbol"] == "X" and row["sector"] == "IT"

def test_enrich_loss(quote_120):
    [row] = portfolio.enrich_holdings([_holding(avg_buy_price=150, quantity=3)])
    assert row["pl"] == -90.0
    assert row["pl_pct"] == -20.0

@pytest.mark.parametrize("bad", [
    {"avg_buy_price": 0},
    {"avg_buy_price": -5},
    {"quantity": -1},
    {"symbol": ""},
])
def test_enrich_rejects_degenerate_holdings(bad):
    with pytest.raises(ValidationError):
        portfolio.enrich_holdings([_holding(**bad)])

def test_enrich_uses_real_quotes_per_day():
    rows = portfolio.enrich_holdings([_holding(symbol="TCS")], DAY)
    again = portfolio.enrich_holdings([_holding(symbol="TCS")], DAY)
    assert rows == again
    assert 200 < rows[0]["current_price"] <= 5000

def test_default_holdings():
    hs = portfolio.default_holdings(seed=3, date_key=DAY)
    assert [h["symbol"] for h in hs] == DEFAULT_PORTFOLIO_SYMBOLS
    assert all(5 <= h["quantity"] <= 54 for h in hs)
    assert all(h["avg_buy_price"] > 0 for h in hs)
    assert hs == portfolio.default_holdings(seed=3, date_key=DAY)
    portfolio.enrich_holdings(hs, DAY)

def test_equity_summary(quote_120):
    rows = portfolio.enrich_holdings([_holding(), _holding(symbol="Y", sector="Banking", quantity=5)])
    s = portfolio.equity_summary(rows)
    assert s["total_invested"] == 1500
    assert s["total_current"] == 1800
    assert s["total_pl"] == 300
    assert s["total_pl_pct"] == pytest.approx(20.0)
    assert {a["name"]: a["value"] for a in s["sector_allocation"]} == {"IT": 1200, "Banking": 600}

def test_equity_summary_empty():
    assert portfolio.equity_summary([])["total_pl_pct"] == 0

def test_portfolio_overview_legs(quote_120):
    equity = portfolio.enrich_holdings([_holding()])
    fno = [{"ltp": 110.0, "avg_price": 100.0, "quantity": 2}]
    funds = [{"current_value": 500, "invested_value": 400}]
    o = portfolio.portfolio_overview(equity, fno, funds, seed=1)
    assert o["total_value"] == 1200 + 220 + 500 + CASH_BALANCE
    assert o["total_invested"] == 1000 + 200 + 400 + CASH_BALANCE
    assert o["overall_pl"] == pytest.approx(320)
    assert [a["name"] for a in o["allocation"]] == ["Equity", "F&O", "Mutual Funds", "Cash"]

def test_portfolio_overview_drops_empty_legs():
    o = portfolio.portfolio_overview([], [], [], seed=1)
    assert o["allocation"] == [{"name": "Cash", "value": CASH_BALANCE}]
