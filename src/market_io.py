"""
I/O helpers for schemas and response envelopes.

PURPOSE: Central place for JSON schema validation of everything that crosses a
         boundary (requests, holdings, preferences, stock analyses) and for the
         ok/error envelopes returned by the handler.
CONTEXT: Generators assume well-formed input; these checks reject degenerate
         records (empty symbols, zero buy prices, negative quantities) up front.
"""

from __future__ import annotations

import json
import pathlib
from functools import lru_cache
from typing import Any, Dict, List

from jsonschema import Draft7Validator, ValidationError

# Project root; schemas live in ./schemas/.
ROOT = pathlib.Path(__file__).resolve().parent.parent


# -------------------- Schema loading utilities -------------------- #

@lru_cache(maxsize=64)
def _load_schema_cached(abs_path: str) -> Dict[str, Any]:
    """
    Read and parse a JSON schema file, caching it to avoid repeated disk I/O.
    """
    p = pathlib.Path(abs_path)
    text = p.read_text(encoding="utf-8")
    return json.loads(text)


def load_schema(path: str) -> Dict[str, Any]:
    """
    Load a JSON schema from a relative or absolute path (with caching).

    parameters:
    - path: str – e.g. "schemas/holdings.schema.json".

    returns:
    - dict – schema as a Python dictionary.

    raises:
    - FileNotFoundError – if the file exists neither as given nor under the project root.
    - json.JSONDecodeError – if the file is not valid JSON.
    """
    p = pathlib.Path(path)
    if not p.exists():
        alt = ROOT.joinpath(path)
        if not alt.exists():
            raise FileNotFoundError(f"Schema not found at: {path}")
        p = alt
    return _load_schema_cached(str(p.resolve()))


# -------------------- Validation helpers -------------------- #

def validate_with_schema(instance: Any, schema: Dict[str, Any]) -> None:
    """
    Validate a given instance against a provided schema.

    raises:
    - ValidationError – if instance fails to meet schema requirements.
    """
    Draft7Validator(schema).validate(instance)


def validate_request(payload: Dict[str, Any]) -> None:
    """Validate a handler request (action plus its arguments)."""
    validate_with_schema(payload, load_schema("schemas/request.schema.json"))


def validate_analysis_request(payload: Dict[str, Any]) -> None:
    validate_with_schema(payload, load_schema("schemas/analysis_request.schema.json"))


def validate_holdings(holdings: List[Dict[str, Any]]) -> None:
    """
    Validate portfolio holdings before valuation.

    notes:
    - avg_buy_price must be > 0 (it is the P&L % denominator); quantity must be >= 0.
    """
    validate_with_schema(holdings, load_schema("schemas/holdings.schema.json"))


def validate_preferences(prefs: Dict[str, Any]) -> None:
    validate_with_schema(prefs, load_schema("schemas/preferences.schema.json"))


def validate_stock_data(data: Dict[str, Any]) -> None:
    """
    Validate a stock analysis, whether generated locally or returned by the remote endpoint.
    """
    validate_with_schema(data, load_schema("schemas/stock_data.schema.json"))


# -------------------- Envelope helpers -------------------- #

def make_ok(data: Any, **extra: Any) -> Dict[str, Any]:
    """Wrap a result as {"status": "ok", "data": ...} plus any extra top-level fields."""
    return {"status": "ok", "data": data, **extra}


def make_error(message: str, **extra: Any) -> Dict[str, Any]:
    return {"status": "error", "error": str(message), **extra}


def error_to_string(err: Exception) -> str:
    """
    Convert exceptions into readable strings for error bodies.

    notes:
    - ValidationError messages include a pointer path showing where validation failed.
    """
    if isinstance(err, ValidationError):
        # Include JSON path context (e.g. $[0].avg_buy_price)
        path = "$" + "".join(f"[{repr(p)}]" if isinstance(p, int) else f".{p}" for p in err.path)
        return f"{err.message} at {path}"
    return f"{type(err).__name__}: {err}"


__all__ = [
    "load_schema",
    "validate_with_schema",
    "validate_request",
    "validate_analysis_request",
    "validate_holdings",
    "validate_preferences",
    "validate_stock_data",
    "make_ok",
    "make_error",
    "error_to_string",
]
