# PURPOSE: Mutual fund holdings, NAV history and SIP controls.
# CONTEXT: Fund baselines (NAV, units, invested) are fixed; only next-SIP dates and the
#          NAV walk use randomness.

from __future__ import annotations
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

import numpy as np

from src.constants.market import MUTUAL_FUNDS
from src.model_interface.types import MutualFund, NavPoint
from src.utils.market_calendar import short_label, today_market
from src.utils.rounding import pct2, round2, round_half_up

DAYS_PER_MONTH = 30
STEP_DAYS = 7


def generate_mutual_funds(today: Optional[date] = None, seed: Optional[int] = None) -> List[MutualFund]:
    """
    Build the six-fund book.

    returns:
    - list[MutualFund] – current_value = round(nav * units); SIP fields are None for
      funds without a SIP.
    """
    rng = np.random.default_rng(seed)
    today = today or today_market()
    funds: List[MutualFund] = []
    for i, f in enumerate(MUTUAL_FUNDS):
        current = int(round_half_up(f["nav"] * f["units"]))
        returns = current - f["invested"]
        next_sip = today + timedelta(days=int(rng.random() * 25) + 1)
        funds.append({
            "id": f"mf-{i}",
            "name": f["name"],
            "category": f["category"],
            "nav": f["nav"],
            "units": f["units"],
            "invested_value": f["invested"],
            "current_value": current,
            "returns": returns,
            "returns_pct": pct2(returns, f["invested"]),
            "risk_level": f["risk"],
            "expense_ratio": f["expense"],
            "sip_active": f["sip"],
            "sip_amount": f.get("sip_amount"),
            "sip_frequency": "Monthly" if f["sip"] else None,
            "next_sip_date": next_sip.isoformat() if f["sip"] else None,
        })
    return funds


def nav_history(current_nav: float, months: int = 12, today: Optional[date] = None,
                seed: Optional[int] = None) -> List[NavPoint]:
    """
    Weekly NAV path ending exactly at current_nav.

    parameters:
    - current_nav: float – today's NAV, must be > 0.
    - months: int – look-back in 30-day months, must be >= 1.

    returns:
    - list[NavPoint] – oldest first, one point every 7 days.

    raises:
    - ValueError – for a non-positive NAV or months < 1.

    notes:
    - Starts 20-40% below current_nav and compounds the implied daily growth over each
      week with +/-3% noise; the last point is then overwritten with current_nav.
    """
    if current_nav <= 0:
        raise ValueError(f"current_nav must be > 0, got {current_nav}")
    if months < 1:
        raise ValueError(f"months must be >= 1, got {months}")
    rng = np.random.default_rng(seed)
    today = today or today_market()

    span = months * DAYS_PER_MONTH
    nav = current_nav * (0.6 + rng.random() * 0.2)
    daily_growth = (current_nav / nav) ** (1 / span)

    points: List[NavPoint] = []
    for days_ago in range(span, -1, -STEP_DAYS):
        nav *= daily_growth ** STEP_DAYS * (0.97 + rng.random() * 0.06)
        points.append({"date": short_label(today - timedelta(days=days_ago)), "nav": round2(nav)})
    points[-1]["nav"] = current_nav
    return points


def mf_summary(funds: List[MutualFund], seed: Optional[int] = None) -> Dict[str, Any]:
    rng = np.random.default_rng(seed)
    value = sum(f["current_value"] for f in funds)
    invested = sum(f["invested_value"] for f in funds)
    returns = value - invested
    return {
        "total_value": value,
        "total_invested": invested,
        "total_returns": returns,
        "total_returns_pct": pct2(returns, invested) if invested > 0 else 0,
        "today_change": int(round_half_up((rng.random() - 0.45) * value * 0.01)),
        "active_sips": sum(1 for f in funds if f["sip_active"]),
    }


def toggle_sip(funds: List[MutualFund], fund_id: str) -> List[MutualFund]:
    """
    Pause or resume the SIP on one fund.

    returns:
    - list[MutualFund] – new list; the matching fund is copied with sip_active flipped.

    raises:
    - ValueError – if no fund has fund_id.
    """
    if not any(f["id"] == fund_id for f in funds):
        raise ValueError(f"Unknown fund id: {fund_id}")
    return [{**f, "sip_active": not f["sip_active"]} if f["id"] == fund_id else f for f in funds]
