"""Calendar helpers for the Indian market day.

Quote seeds, history labels and derivative expiries all hang off "today" in
the market timezone (MARKET_TZ, default Asia/Kolkata). Labels use fixed
English abbreviations so output does not depend on the process locale.
"""

from __future__ import annotations

import os
import calendar
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from src.constants.market import MONTH_ABBR, WEEKDAY_ABBR

TZ = ZoneInfo(os.getenv("MARKET_TZ", "Asia/Kolkata"))
THURSDAY = 3


def now_market() -> datetime:
    """Current time in the market timezone."""
    return datetime.now(TZ)


def today_market() -> date:
    return now_market().date()


def date_key(d: date | None = None) -> str:
    """Calendar-day string appended to symbols for daily quote seeds, e.g. 'Mon Oct 19 2026'."""
    d = d or today_market()
    return f"{WEEKDAY_ABBR[d.weekday()]} {MONTH_ABBR[d.month - 1]} {d.day:02d} {d.year}"


def day_label(d: date) -> str:
    """Zero-padded 'DD Mon' label used on price history points."""
    return f"{d.day:02d} {MONTH_ABBR[d.month - 1]}"


def short_label(d: date) -> str:
    """'D Mon' label used on NAV history points."""
    return f"{d.day} {MONTH_ABBR[d.month - 1]}"


def next_weekly_expiry(today: date | None = None) -> date:
    """Next Thursday strictly after today (a Thursday rolls to the following week)."""
    today = today or today_market()
    days = (THURSDAY - today.weekday()) % 7 or 7
    return today + timedelta(days=days)


def monthly_expiry(today: date | None = None) -> date:
    """Last Thursday of the current month, even if it has already passed."""
    today = today or today_market()
    last = date(today.year, today.month, calendar.monthrange(today.year, today.month)[1])
    while last.weekday() != THURSDAY:
        last -= timedelta(days=1)
    return last
