# PURPOSE: Request-level flows: a stock analysis (remote AI with seeded fallback) and a
#          full portfolio snapshot (equity, F&O, mutual funds, overview).
# CONTEXT: Called by the Lambda handler and the local CLI. Output is validated before
#          it is returned so consumers always see the same shape.

from __future__ import annotations
import json, time, uuid
from datetime import datetime
from typing import Any, Dict, Optional

import structlog

from src import state_manager
from src.market_io import error_to_string, validate_analysis_request, validate_stock_data
from src.model_impl.seeded_model import SeededModel
from src.model_interface.analysis_model import AnalysisModel
from src.model_interface.loader import load_model
from src.tools import fno, mutual_funds, portfolio
from src.tools.company_search import get_company
from src.utils.market_calendar import TZ

log = structlog.get_logger().bind(component="pipeline")

FALLBACK_NOTICE = "Live AI analysis is unavailable; showing generated research data instead."


def _uuid_v7_like() -> str:
    """
    Create a readable run ID using a short random prefix and a timestamp suffix.
    Example: 'a1b2c3d4-20261019091500'
    """
    return uuid.uuid4().hex[:8] + "-" + datetime.now(TZ).strftime("%Y%m%d%H%M%S")


def run_analysis(payload: Dict[str, Any], model: Optional[AnalysisModel] = None) -> Dict[str, Any]:
    """
    Analyse one listed company.

    steps:
    1) Validate the request and resolve the symbol in the company directory.
    2) Ask the configured model (remote endpoint or seeded generator).
    3) If that fails or returns a malformed document, substitute the seeded generator
       and flag fallback_used with a generic notice.

    returns:
    - dict – {"status", "data", "fallback_used", "notice", "run_id", "latency_ms"}.

    raises:
    - ValidationError – malformed request.
    - ValueError – unknown symbol.
    """
    t0 = time.time()
    validate_analysis_request(payload)
    company = get_company(payload["symbol"])
    if company is None:
        raise ValueError(f"Unknown symbol: {payload['symbol']}")

    model = model or load_model()
    fallback_used = False
    try:
        data = model.analyze(company)
        validate_stock_data(data)
    except Exception as e:
        if isinstance(model, SeededModel):
            raise
        log.warning("analysis.fallback_used", symbol=company["symbol"], error=error_to_string(e))
        data = SeededModel().analyze(company)
        fallback_used = True

    return {
        "status": "ok",
        "data": data,
        "fallback_used": fallback_used,
        "notice": FALLBACK_NOTICE if fallback_used else None,
        "run_id": _uuid_v7_like(),
        "latency_ms": int((time.time() - t0) * 1000),
    }


def run_portfolio(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Value every tab of the portfolio page.

    behaviour:
    - With user_id: holdings and SIP choices come from state_manager (first visit seeds
      the default portfolio).
    - Without: uses payload["holdings"] if given, else a fresh default portfolio.
    - payload["seed"] makes the unseeded parts (F&O prices, NAV noise, day P&L) repeatable.
    """
    t0 = time.time()
    seed = payload.get("seed")
    user_id = payload.get("user_id")
    date_key = payload.get("date_key")

    if user_id:
        holdings = state_manager.load_holdings(user_id, seed=seed)
        overrides = state_manager.load_sip_overrides(user_id)
    else:
        holdings = payload.get("holdings") or portfolio.default_holdings(seed=seed, date_key=date_key)
        overrides = {}

    equity = portfolio.enrich_holdings(holdings, date_key)
    positions = fno.generate_fno_positions(seed=seed)
    funds = state_manager.apply_sip_overrides(mutual_funds.generate_mutual_funds(seed=seed), overrides)

    return {
        "status": "ok",
        "data": {
            "equity": equity,
            "equity_summary": portfolio.equity_summary(equity),
            "fno": positions,
            "fno_summary": fno.fno_summary(positions, seed=seed),
            "mutual_funds": funds,
            "mf_summary": mutual_funds.mf_summary(funds, seed=seed),
            "overview": portfolio.portfolio_overview(equity, positions, funds, seed=seed),
        },
        "run_id": _uuid_v7_like(),
        "latency_ms": int((time.time() - t0) * 1000),
    }


if __name__ == "__main__":
    # Quick manual run to see a formatted result in the console.
    print(json.dumps(run_analysis({"symbol": "TCS"}, model=SeededModel()), indent=2, ensure_ascii=False))
