TRENDING_SYMBOLS = ["RELIANCE", "TCS", "HDFCBANK", "INFY", "BHARTIARTL", "TATAMOTORS", "SBIN", "ITC"]

DEFAULT_PORTFOLIO_SYMBOLS = [
    "RELIANCE", "TCS", "HDFCBANK", "INFY", "TATAMOTORS",
    "SBIN", "ITC", "WIPRO", "BHARTIARTL", "BAJFINANCE",
]

# Fixed news slot layout: sentiment and source per position.
NEWS_SENTIMENT_PATTERN = ["positive", "neutral", "negative", "positive", "neutral"]
NEWS_SOURCES = ["Economic Times", "Moneycontrol", "LiveMint", "CNBC TV18", "Business Standard"]

NEWS_HEADLINES = {
    "positive": [
        "reports strong quarterly earnings beating estimates",
        "announces strategic expansion into new markets",
        "receives upgraded rating from major brokerage",
        "signs landmark partnership deal worth billions",
        "posts record revenue growth in latest quarter",
    ],
    "negative": [
        "faces regulatory scrutiny over compliance concerns",
        "reports lower than expected quarterly profits",
        "sees key management departures in leadership shakeup",
        "impacted by global supply chain disruptions",
        "faces increased competition in core market segment",
    ],
    "neutral": [
        "maintains steady growth trajectory in annual review",
        "announces board meeting for quarterly results review",
        "participates in industry conference showcasing roadmap",
        "declares interim dividend for shareholders",
        "completes planned restructuring of business units",
    ],
}

QUARTERS = ["Q1 FY24", "Q2 FY24", "Q3 FY24", "Q4 FY24", "Q1 FY25", "Q2 FY25", "Q3 FY25", "Q4 FY25"]

RISK_SCORES = ["Low", "Medium", "High"]
HOLDING_PERIODS = ["Short", "Medium", "Long"]

# Locale-independent month abbreviations for "DD Mon" labels.
MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
WEEKDAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# F&O book: (instrument, contract type, strike, lot quantity).
FNO_BOOK = [
    ("NIFTY", "Call", 24500, 50),
    ("NIFTY", "Put", 24000, 50),
    ("BANKNIFTY", "Call", 52000, 15),
    ("BANKNIFTY", "Futures", 0, 15),
    ("RELIANCE", "Call", 2900, 250),
    ("TCS", "Put", 3800, 125),
]
FUTURES_BASE_PRICE = {"NIFTY": 24200, "BANKNIFTY": 51800}
FUTURES_DEFAULT_BASE = 2800
FNO_MARGIN_LIMIT = 500000

MUTUAL_FUNDS = [
    {"name": "Axis Bluechip Fund - Direct Growth", "category": "Equity", "nav": 52.34, "units": 245.67,
     "invested": 10000, "risk": "Moderate", "expense": 0.49, "sip": True, "sip_amount": 5000},
    {"name": "Mirae Asset Large Cap Fund - Direct", "category": "Equity", "nav": 98.12, "units": 102.34,
     "invested": 8000, "risk": "Moderate", "expense": 0.53, "sip": True, "sip_amount": 3000},
    {"name": "Parag Parikh Flexi Cap Fund - Direct", "category": "Equity", "nav": 72.45, "units": 180.90,
     "invested": 12000, "risk": "High", "expense": 0.63, "sip": False},
    {"name": "HDFC Short Term Debt Fund - Direct", "category": "Debt", "nav": 28.67, "units": 520.30,
     "invested": 15000, "risk": "Low", "expense": 0.30, "sip": True, "sip_amount": 10000},
    {"name": "ICICI Pru Balanced Advantage - Direct", "category": "Hybrid", "nav": 61.23, "units": 163.45,
     "invested": 9000, "risk": "Moderate", "expense": 0.82, "sip": False},
    {"name": "SBI Equity Hybrid Fund - Direct", "category": "Hybrid", "nav": 234.56, "units": 42.10,
     "invested": 8500, "risk": "Moderate", "expense": 0.72, "sip": True, "sip_amount": 2000},
]

# Cash leg shown alongside holdings in the portfolio overview.
CASH_BALANCE = 125000
