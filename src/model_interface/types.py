from typing import TypedDict, Literal, Optional, List

Sentiment = Literal["positive", "neutral", "negative"]
Direction = Literal["POSITIVE", "NEUTRAL", "NEGATIVE"]
Trend = Literal["STRENGTHENING", "WEAKENING", "STABLE"]
Action = Literal["BUY", "SELL", "HOLD"]
ContractType = Literal["Call", "Put", "Futures"]
FundCategory = Literal["Equity", "Debt", "Hybrid"]

class Company(TypedDict):
    name: str
    symbol: str
    exchange: str
    sector: str

class Quote(TypedDict):
    price: float
    change: float
    change_pct: float

class PricePoint(TypedDict):
    label: str
    price: float

class QuarterlyResult(TypedDict):
    quarter: str
    revenue: int
    profit: int
    eps: float

class NewsItem(TypedDict):
    headline: str
    source: str
    relative_time: str
    sentiment: Sentiment

class SentimentSummary(TypedDict):
    avg_sentiment: float
    confidence: float
    direction: Direction
    trend: Trend

class AIAnalysis(TypedDict):
    news_summary: List[str]
    insight: str
    buy_pct: int
    sell_pct: int
    hold_pct: int
    risk_score: Literal["Low", "Medium", "High"]
    holding_period: Literal["Short", "Medium", "Long"]

class Decision(TypedDict):
    action: Action
    confidence: float
    explanation: str

class StockData(TypedDict):
    company: Company
    current_price: float
    change: float
    change_pct: float
    day_high: float
    day_low: float
    volume: str
    market_cap: str
    pe: float
    price_history: List[PricePoint]
    quarterly_results: List[QuarterlyResult]
    news: List[NewsItem]
    sentiment: SentimentSummary
    ai_analysis: AIAnalysis
    decision: Decision

class Holding(TypedDict):
    symbol: str
    company_name: str
    exchange: str
    sector: str
    quantity: int
    avg_buy_price: float

class EnrichedHolding(Holding):
    current_price: float
    change: float
    change_pct: float
    pl: float
    pl_pct: float

class FnOPosition(TypedDict, total=False):
    id: str
    instrument: str
    contract_type: ContractType
    strike_price: int
    expiry: str
    quantity: int
    avg_price: float
    ltp: float
    unrealized_pl: float
    unrealized_pl_pct: float
    margin_used: int
    entry_time: str
    stop_loss: float
    target: float
    delta: Optional[float]
    theta: Optional[float]

class MutualFund(TypedDict, total=False):
    id: str
    name: str
    category: FundCategory
    nav: float
    units: float
    invested_value: int
    current_value: int
    returns: int
    returns_pct: float
    risk_level: Literal["Low", "Moderate", "High"]
    expense_ratio: float
    sip_active: bool
    sip_amount: Optional[int]
    sip_frequency: Optional[str]
    next_sip_date: Optional[str]

class NavPoint(TypedDict):
    date: str
    nav: float

class Preferences(TypedDict, total=False):
    theme: Literal["dark", "light"]
    active_tab: Literal["overview", "equity", "fno", "mf"]
    disclaimer_accepted: bool
