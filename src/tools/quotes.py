# PURPOSE: Daily synthetic price quotes for portfolio valuation and market movers.
# CONTEXT: Seeded by symbol + calendar day, so a quote is stable within a day and
#          moves on date rollover.

from __future__ import annotations
from typing import List, Optional

from src.constants.companies import COMPANIES
from src.constants.market import TRENDING_SYMBOLS
from src.model_interface.types import Quote
from src.utils.market_calendar import date_key as _today_key
from src.utils.rounding import round2, pct2
from src.utils.seeded import SeededStream, seed_from_key

# Only the head of the directory is scanned for movers.
MOVERS_UNIVERSE = 20


def get_quote(symbol: str, date_key: Optional[str] = None) -> Quote:
    """
    Generate the quote for symbol on a given day.

    parameters:
    - symbol: str – ticker, must be non-empty.
    - date_key: str (optional) – day string mixed into the seed; defaults to today.

    returns:
    - Quote – {"price", "change", "change_pct"}; price in (200, 5000].

    raises:
    - ValueError – if symbol is empty.
    """
    if not symbol:
        raise ValueError("symbol must be a non-empty string")
    if date_key is None:
        date_key = _today_key()
    rand = SeededStream(seed_from_key(symbol + date_key))
    base = 200 + rand() * 4800
    price = round2(base)
    change = round2((rand() - 0.45) * base * 0.04)
    change_pct = pct2(change, price - change)
    return {"price": price, "change": change, "change_pct": change_pct}


def short_name(name: str) -> str:
    """First two words of a company name ('Tata Consultancy Services Limited' -> 'Tata Consultancy')."""
    return " ".join(name.split(" ")[:2])


def market_movers(companies: Optional[List[dict]] = None, limit: int = 5, date_key: Optional[str] = None) -> dict:
    """
    Rank today's gainers and losers.

    returns:
    - dict – {"bullish": [...], "bearish": [...]}, each entry
      {"symbol", "name", "price", "change_pct"}; bullish sorted by change_pct
      descending (zero counts as bullish), bearish ascending.
    """
    universe = (companies if companies is not None else COMPANIES)[:MOVERS_UNIVERSE]
    bullish, bearish = [], []
    for c in universe:
        q = get_quote(c["symbol"], date_key)
        entry = {"symbol": c["symbol"], "name": short_name(c["name"]),
                 "price": q["price"], "change_pct": q["change_pct"]}
        (bullish if q["change_pct"] >= 0 else bearish).append(entry)
    bullish.sort(key=lambda e: e["change_pct"], reverse=True)
    bearish.sort(key=lambda e: e["change_pct"])
    return {"bullish": bullish[:limit], "bearish": bearish[:limit]}


def trending_symbols() -> List[str]:
    return list(TRENDING_SYMBOLS)
