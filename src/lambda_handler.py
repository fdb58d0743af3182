"""
AWS Lambda handler: validates input, dispatches to the market-data operations,
returns a JSON body. Adds structured, CloudWatch-friendly logs with correlation IDs.

PURPOSE:
- Entry point for AWS Lambda behind API Gateway.
- Normalises the incoming event, routes on "action", and maps failures onto
  HTTP-style error bodies (400 for bad input, 500 for anything unexpected).

CONTEXT:
- Serves the dashboard: quotes, stock analysis, market movers, company search,
  the portfolio tabs, NAV history and per-user preferences / SIP toggles.
"""

from __future__ import annotations
import json
import time
import traceback
import uuid
from typing import Any, Callable, Dict

from jsonschema import ValidationError

from src import state_manager
from src.logging_setup import bind_request, configure_logging
from src.market_io import error_to_string, make_error, make_ok, validate_request
from src.pipeline import run_analysis, run_portfolio
from src.tools import fno, mutual_funds, quotes
from src.tools.company_search import search_companies


# Configure a structured logger once; emits JSON-like key/value logs.
log = configure_logging()


def _response(body: Dict[str, Any], status_code: int = 200) -> Dict[str, Any]:
    """Wrap a dict into an API Gateway compatible response."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def _quote(body):
    if not body.get("symbol"):
        raise ValueError("quote requires a symbol")
    return make_ok(quotes.get_quote(body["symbol"], body.get("date_key")))


def _movers(body):
    return make_ok({**quotes.market_movers(date_key=body.get("date_key")),
                    "trending": quotes.trending_symbols()})


def _search(body):
    return make_ok(search_companies(body.get("query", "")))


def _fno(body):
    positions = fno.generate_fno_positions(seed=body.get("seed"))
    return make_ok({"positions": positions, "summary": fno.fno_summary(positions, seed=body.get("seed"))})


def _mutual_funds(body):
    funds = mutual_funds.generate_mutual_funds(seed=body.get("seed"))
    if body.get("user_id"):
        funds = state_manager.apply_sip_overrides(funds, state_manager.load_sip_overrides(body["user_id"]))
    return make_ok({"funds": funds, "summary": mutual_funds.mf_summary(funds, seed=body.get("seed"))})


def _nav_history(body):
    if "nav" not in body:
        raise ValueError("nav_history requires nav")
    return make_ok(mutual_funds.nav_history(body["nav"], body.get("months", 12), seed=body.get("seed")))


def _preferences(body):
    if not body.get("user_id"):
        raise ValueError("preferences requires a user_id")
    if body.get("changes"):
        return make_ok(state_manager.save_preferences(body["user_id"], body["changes"]))
    return make_ok(state_manager.load_preferences(body["user_id"]))


def _toggle_sip(body):
    user_id, fund_id = body.get("user_id"), body.get("fund_id")
    if not user_id or not fund_id:
        raise ValueError("toggle_sip requires user_id and fund_id")
    funds = state_manager.apply_sip_overrides(
        mutual_funds.generate_mutual_funds(), state_manager.load_sip_overrides(user_id))
    toggled = next(f for f in mutual_funds.toggle_sip(funds, fund_id) if f["id"] == fund_id)
    state_manager.set_sip_active(user_id, fund_id, toggled["sip_active"])
    return make_ok(toggled)


ROUTES: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    "quote": _quote,
    "analysis": lambda body: run_analysis({k: body[k] for k in ("symbol",) if k in body}),
    "movers": _movers,
    "search": _search,
    "portfolio": run_portfolio,
    "fno": _fno,
    "mutual_funds": _mutual_funds,
    "nav_history": _nav_history,
    "preferences": _preferences,
    "toggle_sip": _toggle_sip,
}


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Lambda entry point.

    flow:
    1) Bind request/correlation IDs as log context for this request (every layer logs them).
    2) Normalise body (handles API Gateway proxy format if present).
    3) Validate the request and dispatch on "action".
    4) Bad input (schema or precondition) -> 400; unexpected exceptions -> 500 with the
       traceback logged.

    returns:
    - dict – API Gateway compatible response with JSON body.
    """
    t0 = time.time()

    request_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
    correlation_id = (event.get("headers", {}) or {}).get("x-correlation-id") or str(uuid.uuid4())
    bind_request(request_id, correlation_id)
    log.info("request.received", event_type=type(event).__name__)

    body = event
    if isinstance(event, dict) and "body" in event:
        try:
            body = json.loads(event["body"]) if isinstance(event["body"], str) else (event["body"] or {})
        except json.JSONDecodeError:
            body = {}
            log.warning("request.body_parse_failed")

    try:
        validate_request(body)
        result = ROUTES[body["action"]](body)
        latency_ms = round((time.time() - t0) * 1000, 1)
        log.info("response.success", action=body["action"], latency_ms=latency_ms)
        return _response(result, 200)

    except (ValidationError, ValueError) as e:
        latency_ms = round((time.time() - t0) * 1000, 1)
        log.warning("response.bad_request", error=error_to_string(e), latency_ms=latency_ms)
        return _response(make_error(error_to_string(e), latency_ms=latency_ms), 400)

    except Exception as e:
        latency_ms = round((time.time() - t0) * 1000, 1)
        log.error(
            "response.error",
            error=str(e),
            traceback=traceback.format_exc(limit=2),
            latency_ms=latency_ms,
        )
        return _response(make_error(f"{type(e).__name__}: {e}", latency_ms=latency_ms), 500)
