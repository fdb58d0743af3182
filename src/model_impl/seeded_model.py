# PURPOSE: Deterministic per-symbol stock analysis (price, history, results, news,
#          sentiment, buy/sell/hold split and decision) from a single seeded stream.
# CONTEXT: Used directly when no remote analysis endpoint is configured, and as the
#          fallback whenever the remote endpoint fails.
# NOTE: The order in which the stream is consumed is part of the output contract.
#       Reordering draws changes every figure for every existing symbol; bump
#       DRAW_ORDER_VERSION if that is ever intended.

from __future__ import annotations
from datetime import date, timedelta
from typing import List, Tuple

from src.constants.market import (
    HOLDING_PERIODS,
    NEWS_HEADLINES,
    NEWS_SENTIMENT_PATTERN,
    NEWS_SOURCES,
    QUARTERS,
    RISK_SCORES,
)
from src.model_interface.analysis_model import AnalysisModel
from src.model_interface.types import (
    Action, AIAnalysis, Company, Decision, NewsItem, PricePoint,
    QuarterlyResult, SentimentSummary, StockData,
)
from src.utils.market_calendar import day_label, today_market
from src.utils.rounding import pct2, round2, round_half_up, to_fixed
from src.utils.seeded import SeededStream, seed_from_key

DRAW_ORDER_VERSION = 1
HISTORY_DAYS = 30
HISTORY_FLOOR = 0.85

SENTIMENT_MODIFIERS = {
    "POSITIVE": "strengthened by positive market sentiment",
    "NEGATIVE": "tempered by negative market sentiment",
    "NEUTRAL": "balanced with neutral market sentiment",
}


def decide_action(buy_pct: float, sell_pct: float, hold_pct: float) -> Action:
    """Largest share wins; exact ties resolve BUY, then SELL, then HOLD."""
    if buy_pct >= sell_pct and buy_pct >= hold_pct:
        return "BUY"
    if sell_pct >= hold_pct:
        return "SELL"
    return "HOLD"


def sentiment_direction(avg_sentiment: float) -> str:
    if avg_sentiment > 0.2:
        return "POSITIVE"
    if avg_sentiment < -0.2:
        return "NEGATIVE"
    return "NEUTRAL"


def _price_history(rand: SeededStream, base: float, price: float, change: float, today: date) -> List[PricePoint]:
    """Random walk back-projected from today; never below 85% of the base price."""
    points: List[PricePoint] = []
    p = price - change * 15
    for days_ago in range(HISTORY_DAYS - 1, -1, -1):
        p += (rand() - 0.48) * base * 0.015
        p = max(p, base * HISTORY_FLOOR)
        points.append({"label": day_label(today - timedelta(days=days_ago)), "price": round2(p)})
    return points


def _quarterly_results(rand: SeededStream) -> List[QuarterlyResult]:
    results: List[QuarterlyResult] = []
    for q in QUARTERS:
        revenue = 1000 + rand() * 15000
        margin = 0.05 + rand() * 0.25
        results.append({
            "quarter": q,
            "revenue": int(round_half_up(revenue)),
            "profit": int(round_half_up(revenue * margin)),
            "eps": round2(rand() * 50),
        })
    return results


def _news(rand: SeededStream, company_name: str) -> List[NewsItem]:
    items: List[NewsItem] = []
    for slot, tone in enumerate(NEWS_SENTIMENT_PATTERN):
        headline = rand.pick(NEWS_HEADLINES[tone])
        hours = int(rand() * 12) + 1
        items.append({
            "headline": f"{company_name} {headline}",
            "source": NEWS_SOURCES[slot],
            "relative_time": f"{hours}h ago",
            "sentiment": tone,
        })
    return items


def _sentiment(rand: SeededStream) -> SentimentSummary:
    avg = round2(rand() * 2 - 1)
    confidence = round2(0.5 + rand() * 0.5)
    # The second draw only happens when the first misses.
    if rand() > 0.6:
        trend = "STRENGTHENING"
    elif rand() > 0.3:
        trend = "STABLE"
    else:
        trend = "WEAKENING"
    return {
        "avg_sentiment": avg,
        "confidence": confidence,
        "direction": sentiment_direction(avg),
        "trend": trend,
    }


def _recommendation_split(rand: SeededStream) -> Tuple[int, int, int]:
    """
    Buy/sell/hold percentages summing to 100.

    notes:
    - sell is bounded by 100 - buy after rounding, so hold never goes negative.
    """
    buy = int(round_half_up(25 + rand() * 50))
    sell = int(round_half_up(10 + rand() * (90 - buy)))
    return buy, sell, 100 - buy - sell


def _outlook(buy_pct: int) -> str:
    if buy_pct > 50:
        return "strong growth potential"
    if buy_pct > 35:
        return "moderate outlook"
    return "cautious positioning"


def generate_stock_data(company: Company, today: date | None = None) -> StockData:
    """
    Build the full analysis bundle for one company.

    parameters:
    - company: Company – needs name, symbol and sector.
    - today: date (optional) – anchors the history labels; defaults to the market day.

    returns:
    - StockData – identical for identical symbols (labels aside, which follow today).

    raises:
    - ValueError – if the symbol is empty.
    """
    rand = SeededStream(seed_from_key(company["symbol"]))
    today = today or today_market()
    name = company["name"]

    base = 500 + rand() * 4500
    price = round2(base)
    change = round2((rand() - 0.45) * base * 0.04)
    change_pct = pct2(change, price - change)

    history = _price_history(rand, base, price, change, today)
    quarterly = _quarterly_results(rand)
    news = _news(rand, name)
    sentiment = _sentiment(rand)
    buy, sell, hold = _recommendation_split(rand)

    ai_analysis: AIAnalysis = {
        "news_summary": [n["headline"] for n in news],
        "insight": (
            f"Based on comprehensive analysis of {name}'s fundamentals, market positioning, "
            f"and recent quarterly performance, the company shows {_outlook(buy)} driven by "
            f"{company['sector']} sector dynamics. Key drivers include revenue trajectory, "
            f"margin expansion potential, and competitive positioning within the Indian market landscape."
        ),
        "buy_pct": buy,
        "sell_pct": sell,
        "hold_pct": hold,
        "risk_score": rand.pick(RISK_SCORES),
        "holding_period": rand.pick(HOLDING_PERIODS),
    }

    action = decide_action(buy, sell, hold)
    decision: Decision = {
        "action": action,
        "confidence": round2(0.55 + rand() * 0.4),
        "explanation": (
            f"The {action} recommendation for {name} is {SENTIMENT_MODIFIERS[sentiment['direction']]} "
            f"(confidence: {to_fixed(sentiment['confidence'], 2)}). AI analysis assigns {buy}% buy / "
            f"{sell}% sell / {hold}% hold probability. Risk level assessed as {ai_analysis['risk_score']} "
            f"with {ai_analysis['holding_period']}-term holding horizon recommended. "
            f"This is AI-based probabilistic research analysis."
        ),
    }

    day_high = round2(price + rand() * base * 0.02)
    day_low = round2(price - rand() * base * 0.02)
    volume = f"{to_fixed(rand() * 50 + 5, 1)}M"
    market_cap = f"₹{to_fixed(rand() * 15 + 0.5, 2)}L Cr"
    pe = round2(10 + rand() * 60)

    return {
        "company": company,
        "current_price": price,
        "change": change,
        "change_pct": change_pct,
        "day_high": day_high,
        "day_low": day_low,
        "volume": volume,
        "market_cap": market_cap,
        "pe": pe,
        "price_history": history,
        "quarterly_results": quarterly,
        "news": news,
        "sentiment": sentiment,
        "ai_analysis": ai_analysis,
        "decision": decision,
    }


class SeededModel(AnalysisModel):
    """Analysis model backed by generate_stock_data; never fails for a known company."""

    def __init__(self, today: date | None = None):
        self.today = today

    def analyze(self, company: Company) -> StockData:
        return generate_stock_data(company, self.today)
