"""
Per-user dashboard state.

PURPOSE:
- Explicit load/save lifecycle for what the browser used to keep in local storage:
  theme, active portfolio tab and the accepted disclaimer, plus the user's equity
  holdings and SIP pause/resume choices.
- Each record carries a TTL (time-to-live) so abandoned demo users expire.

CONTEXT:
- Backed by DynamoDB via src.tools.dynamodb_tool; one item per user_id.
- Loaded once when a request starts and saved only when something changes.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from datetime import datetime, timedelta, timezone
import os

from src.market_io import validate_holdings, validate_preferences
from src.model_interface.types import Holding, Preferences
from src.tools import dynamodb_tool as ddb
from src.tools import portfolio


# Default number of days to retain user records before DynamoDB expiry.
DEFAULT_TTL_DAYS = int(os.getenv("STATE_TTL_DAYS", "90"))

DEFAULT_PREFERENCES: Preferences = {
    "theme": "dark",
    "active_tab": "overview",
    "disclaimer_accepted": False,
}


def _ttl_epoch(days: int = DEFAULT_TTL_DAYS) -> int:
    """Unix timestamp (seconds) `days` from now, for DynamoDB TTL."""
    return int((datetime.now(timezone.utc) + timedelta(days=days)).timestamp())


def _get_or_create(user_id: str) -> Dict[str, Any]:
    """Fetch the user's record, creating an empty one on first contact."""
    item = ddb.get_item(user_id)
    if item is None:
        item = {
            "user_id": user_id,
            "preferences": dict(DEFAULT_PREFERENCES),
            "holdings": [],
            "sip_overrides": {},
            "ttl_epoch": _ttl_epoch(),
        }
        ddb.put_item(item)
    return item


def load_preferences(user_id: str) -> Preferences:
    """
    Read preferences, filling anything unset with defaults.

    returns:
    - Preferences – always has theme, active_tab and disclaimer_accepted.
    """
    stored = (ddb.get_item(user_id) or {}).get("preferences") or {}
    return {**DEFAULT_PREFERENCES, **stored}


def save_preferences(user_id: str, changes: Dict[str, Any]) -> Preferences:
    """
    Merge and persist preference changes.

    parameters:
    - changes: dict – any subset of theme / active_tab / disclaimer_accepted.

    returns:
    - Preferences – the merged preferences as stored.

    raises:
    - ValidationError – unknown key or out-of-range value.
    """
    validate_preferences(changes)
    current = load_preferences(user_id)
    merged = {**current, **changes}
    _get_or_create(user_id)
    ddb.update_json(user_id, "preferences", merged)
    return merged


def load_holdings(user_id: str, seed: Optional[int] = None) -> List[Holding]:
    """
    Return the user's holdings; first-time users get the default portfolio saved for them.
    """
    item = _get_or_create(user_id)
    holdings = item.get("holdings") or []
    if not holdings:
        holdings = portfolio.default_holdings(seed=seed)
        ddb.update_json(user_id, "holdings", holdings)
    return holdings


def save_holdings(user_id: str, holdings: List[Holding]) -> Dict[str, Any]:
    """
    Replace the user's holdings.

    raises:
    - ValidationError – if any holding is malformed.
    """
    validate_holdings(holdings)
    _get_or_create(user_id)
    return ddb.update_json(user_id, "holdings", holdings)


def load_sip_overrides(user_id: str) -> Dict[str, bool]:
    return dict((ddb.get_item(user_id) or {}).get("sip_overrides") or {})


def set_sip_active(user_id: str, fund_id: str, active: bool) -> Dict[str, bool]:
    """Persist a SIP pause/resume for one fund; returns all overrides."""
    item = _get_or_create(user_id)
    overrides = dict(item.get("sip_overrides") or {})
    overrides[fund_id] = bool(active)
    ddb.update_json(user_id, "sip_overrides", overrides)
    return overrides


def apply_sip_overrides(funds: List[Dict[str, Any]], overrides: Dict[str, bool]) -> List[Dict[str, Any]]:
    """Overlay stored SIP flags onto freshly generated funds."""
    return [{**f, "sip_active": overrides[f["id"]]} if f["id"] in overrides else f for f in funds]
