# PURPOSE: Synthetic futures & options book with P&L, margin and Greeks.
# CONTEXT: Instruments and strikes are fixed; prices and Greeks are drawn fresh on
#          every call (pass seed for reproducible output).

from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

import numpy as np

from src.constants.market import FNO_BOOK, FNO_MARGIN_LIMIT, FUTURES_BASE_PRICE, FUTURES_DEFAULT_BASE
from src.model_interface.types import FnOPosition
from src.utils.market_calendar import monthly_expiry, next_weekly_expiry, now_market
from src.utils.rounding import pct2, round2, round_half_up


def generate_fno_positions(today: Optional[date] = None, seed: Optional[int] = None,
                           now: Optional[datetime] = None) -> List[FnOPosition]:
    """
    Build the six-position F&O book.

    notes:
    - Options: avg price uniform in [50, 350); futures: fixed index/stock base.
    - ltp = avg * (0.85 + u*0.3); margin = 20% of notional.
    - delta/theta are None for futures; put deltas are negative.
    - Expiries alternate weekly / monthly by position index.
    """
    rng = np.random.default_rng(seed)
    now = now or now_market()
    today = today or now.date()
    expiries = [next_weekly_expiry(today).isoformat(), monthly_expiry(today).isoformat()]

    positions: List[FnOPosition] = []
    for i, (instrument, contract, strike, qty) in enumerate(FNO_BOOK):
        if contract == "Futures":
            base = FUTURES_BASE_PRICE.get(instrument, FUTURES_DEFAULT_BASE)
        else:
            base = 50 + rng.random() * 300
        avg = round2(base)
        ltp = round2(avg * (0.85 + rng.random() * 0.3))
        unrealized = round2((ltp - avg) * qty)
        entry = now - timedelta(days=rng.random() * 7)

        delta = theta = None
        if contract != "Futures":
            sign = -1 if contract == "Put" else 1
            delta = round2((rng.random() * 0.8 + 0.1) * sign)
            theta = round2(-rng.random() * 15)

        positions.append({
            "id": f"fno-{i}",
            "instrument": instrument,
            "contract_type": contract,
            "strike_price": strike,
            "expiry": expiries[i % 2],
            "quantity": qty,
            "avg_price": avg,
            "ltp": ltp,
            "unrealized_pl": unrealized,
            "unrealized_pl_pct": pct2(unrealized, avg * qty),
            "margin_used": int(round_half_up(avg * qty * 0.2)),
            "entry_time": entry.isoformat(timespec="seconds"),
            "stop_loss": round2(avg * 0.7),
            "target": round2(avg * 1.5),
            "delta": delta,
            "theta": theta,
        })
    return positions


def fno_summary(positions: List[FnOPosition], seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Margin and P&L roll-up.

    notes:
    - risk_level: High above 300k margin used, Medium above 150k, else Low.
    - realized/day P&L are illustrative random figures.
    """
    rng = np.random.default_rng(seed)
    margin = sum(p["margin_used"] for p in positions)
    unrealized = sum(p["unrealized_pl"] for p in positions)
    if margin > 300000:
        risk = "High"
    elif margin > 150000:
        risk = "Medium"
    else:
        risk = "Low"
    return {
        "total_margin_used": margin,
        "available_margin": int(round_half_up(FNO_MARGIN_LIMIT - margin)),
        "total_unrealized_pl": unrealized,
        "realized_pl": int(round_half_up((rng.random() - 0.3) * 25000)),
        "day_pl": int(round_half_up((rng.random() - 0.45) * 8000)),
        "risk_level": risk,
    }
