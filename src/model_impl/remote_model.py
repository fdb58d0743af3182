# PURPOSE: Analysis model that asks the hosted AI-analysis endpoint for a stock report.
# CONTEXT: The endpoint returns camelCase JSON; this maps it onto StockData. Any failure
#          propagates so the pipeline can fall back to the seeded model.

from __future__ import annotations
import os
from typing import Any, Dict

from src.model_interface.analysis_model import AnalysisModel
from src.model_interface.types import Company, StockData
from src.tools import http_tool

ENDPOINT_URL = os.getenv("ANALYSIS_ENDPOINT_URL", "")
TIMEOUT_S = float(os.getenv("ANALYSIS_TIMEOUT_S", "30"))
API_KEY = os.getenv("ANALYSIS_API_KEY", "")


def _news_item(n: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "headline": n.get("title", ""),
        "source": n.get("source", ""),
        "relative_time": n.get("time", ""),
        "sentiment": n.get("sentiment", "neutral"),
    }


def reshape_response(company: Company, body: Dict[str, Any]) -> StockData:
    """
    Convert the endpoint's camelCase document into StockData.

    raises:
    - RuntimeError – if the endpoint reported an error.
    - KeyError – if a required scalar is missing.
    """
    if body.get("error"):
        raise RuntimeError(f"Analysis endpoint error: {body['error']}")
    ai = body.get("aiAnalysis") or {}
    return {
        "company": company,
        "current_price": body["currentPrice"],
        "change": body["change"],
        "change_pct": body["changePct"],
        "day_high": body["dayHigh"],
        "day_low": body["dayLow"],
        "volume": body["volume"],
        "market_cap": body["marketCap"],
        "pe": body["pe"],
        "price_history": [{"label": p.get("time", ""), "price": p.get("price")} for p in body.get("priceHistory") or []],
        "quarterly_results": body.get("quarterlyResults") or [],
        "news": [_news_item(n) for n in body.get("news") or []],
        "sentiment": body["sentiment"],
        "ai_analysis": {
            "news_summary": ai.get("newsSummary", []),
            "insight": ai.get("insight", ""),
            "buy_pct": ai.get("buyPct"),
            "sell_pct": ai.get("sellPct"),
            "hold_pct": ai.get("holdPct"),
            "risk_score": ai.get("riskScore"),
            "holding_period": ai.get("holdingPeriod"),
        },
        "decision": body["decision"],
    }


class RemoteModel(AnalysisModel):
    def __init__(self, url: str = ENDPOINT_URL, timeout: float = TIMEOUT_S):
        self.url = url
        self.timeout = timeout

    def analyze(self, company: Company) -> StockData:
        if not self.url:
            raise RuntimeError("ANALYSIS_ENDPOINT_URL is not configured")
        headers = {"Authorization": f"Bearer {API_KEY}"} if API_KEY else None
        body = http_tool.post_json(
            self.url,
            {
                "symbol": company["symbol"],
                "companyName": company["name"],
                "sector": company["sector"],
                "exchange": company["exchange"],
            },
            timeout=self.timeout,
            headers=headers,
        )
        return reshape_response(company, body)
