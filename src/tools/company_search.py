from __future__ import annotations
from typing import List, Optional

from src.constants.companies import COMPANIES
from src.model_interface.types import Company

MIN_QUERY_LEN = 3
MAX_RESULTS = 8

def search_companies(query: str) -> List[Company]:
    """Case-insensitive substring match on name, symbol or sector; needs 3+ characters."""
    if len(query) < MIN_QUERY_LEN:
        return []
    q = query.lower()
    hits = [c for c in COMPANIES
            if q in c["name"].lower() or q in c["symbol"].lower() or q in c["sector"].lower()]
    return hits[:MAX_RESULTS]

def get_company(symbol: str) -> Optional[Company]:
    return next((c for c in COMPANIES if c["symbol"] == symbol), None)
