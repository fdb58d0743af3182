# PURPOSE: Equity holdings valuation and whole-portfolio roll-ups.
# CONTEXT: Holdings are owned by the caller (persisted via state_manager); every refresh
#          re-values them against today's synthetic quotes.

from __future__ import annotations
from typing import Any, Dict, List, Optional

import numpy as np

from src.constants.companies import COMPANIES
from src.constants.market import CASH_BALANCE, DEFAULT_PORTFOLIO_SYMBOLS
from src.market_io import validate_holdings
from src.model_interface.types import EnrichedHolding, FnOPosition, Holding, MutualFund
from src.tools import quotes
from src.utils.rounding import round2, round_half_up

_HOLDING_FIELDS = ("symbol", "company_name", "exchange", "sector", "quantity", "avg_buy_price")


def default_holdings(seed: Optional[int] = None, date_key: Optional[str] = None) -> List[Holding]:
    """
    Starter portfolio for a user with no saved holdings.

    notes:
    - Buy prices sit within roughly -9%..+6% of today's quote; quantities are 5..54.
    - Unseeded unless seed is given.
    """
    rng = np.random.default_rng(seed)
    by_symbol = {c["symbol"]: c for c in COMPANIES}
    out: List[Holding] = []
    for sym in DEFAULT_PORTFOLIO_SYMBOLS:
        c = by_symbol[sym]
        price = quotes.get_quote(sym, date_key)["price"]
        buy_offset = (rng.random() - 0.4) * price * 0.15
        out.append({
            "symbol": c["symbol"],
            "company_name": c["name"],
            "exchange": c["exchange"],
            "sector": c["sector"],
            "quantity": int(rng.random() * 50) + 5,
            "avg_buy_price": round2(price - buy_offset),
        })
    return out


def enrich_holdings(holdings: List[Dict[str, Any]], date_key: Optional[str] = None) -> List[EnrichedHolding]:
    """
    Attach today's quote and P&L to each holding.

    returns:
    - list[EnrichedHolding] – input fields plus current_price, change, change_pct, pl, pl_pct.

    raises:
    - ValidationError – empty symbol, negative quantity or avg_buy_price <= 0.
    """
    validate_holdings(holdings)
    enriched: List[EnrichedHolding] = []
    for h in holdings:
        q = quotes.get_quote(h["symbol"], date_key)
        price, avg, qty = q["price"], h["avg_buy_price"], h["quantity"]
        row = {k: h[k] for k in _HOLDING_FIELDS if k in h}
        row.update({
            "current_price": price,
            "change": q["change"],
            "change_pct": q["change_pct"],
            "pl": round2((price - avg) * qty),
            "pl_pct": round2((price - avg) / avg * 100),
        })
        enriched.append(row)
    return enriched


def equity_summary(enriched: List[EnrichedHolding]) -> Dict[str, Any]:
    """Totals and sector weights for the equity tab."""
    invested = sum(s["avg_buy_price"] * s["quantity"] for s in enriched)
    current = sum(s["current_price"] * s["quantity"] for s in enriched)
    pl = current - invested
    sectors: Dict[str, float] = {}
    for s in enriched:
        sectors[s.get("sector", "Other")] = sectors.get(s.get("sector", "Other"), 0) + s["current_price"] * s["quantity"]
    return {
        "total_invested": invested,
        "total_current": current,
        "total_pl": pl,
        "total_pl_pct": (pl / invested) * 100 if invested > 0 else 0,
        "sector_allocation": [{"name": k, "value": int(round_half_up(v))} for k, v in sectors.items()],
    }


def portfolio_overview(equity: List[EnrichedHolding], fno: List[FnOPosition], funds: List[MutualFund],
                       seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Combine equity, F&O, mutual funds and the cash leg.

    returns:
    - dict – total_value, total_invested, overall_pl, overall_pl_pct, today_pl and
      allocation (legs with a zero value are dropped).
    """
    rng = np.random.default_rng(seed)
    equity_value = sum(s["current_price"] * s["quantity"] for s in equity)
    equity_invested = sum(s["avg_buy_price"] * s["quantity"] for s in equity)
    fno_value = sum(p["ltp"] * p["quantity"] for p in fno)
    fno_invested = sum(p["avg_price"] * p["quantity"] for p in fno)
    mf_value = sum(f["current_value"] for f in funds)
    mf_invested = sum(f["invested_value"] for f in funds)

    total_value = equity_value + fno_value + mf_value + CASH_BALANCE
    total_invested = equity_invested + fno_invested + mf_invested + CASH_BALANCE
    overall_pl = total_value - total_invested
    allocation = [
        {"name": "Equity", "value": int(round_half_up(equity_value))},
        {"name": "F&O", "value": int(round_half_up(fno_value))},
        {"name": "Mutual Funds", "value": int(round_half_up(mf_value))},
        {"name": "Cash", "value": CASH_BALANCE},
    ]
    return {
        "total_value": total_value,
        "total_invested": total_invested,
        "overall_pl": overall_pl,
        "overall_pl_pct": (overall_pl / total_invested) * 100 if total_invested > 0 else 0,
        "today_pl": int(round_half_up((rng.random() - 0.4) * total_value * 0.008)),
        "allocation": [a for a in allocation if a["value"] > 0],
    }
