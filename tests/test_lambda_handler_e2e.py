import json

from src import lambda_handler
from src.lambda_handler import handler

class Ctx: aws_request_id = "req-xyz"

def _call(body, headers=None):
    evt = {"body": json.dumps(body), "headers": headers or {"x-correlation-id": "corr-1"}}
    resp = handler(evt, Ctx())
    return resp["statusCode"], json.loads(resp["body"])

def test_quote_ok():
    code, body = _call({"action": "quote", "symbol": "TCS", "date_key": "2024-01-01"})
    assert code == 200 and body["status"] == "ok"
    assert set(body["data"]) == {"price", "change", "change_pct"}

def test_analysis_ok(monkeypatch):
    monkeypatch.delenv("ANALYSIS_MODEL_MODULE", raising=False)
    code, body = _call({"action": "analysis", "symbol": "RELIANCE"})
    assert code == 200
    assert body["data"]["company"]["symbol"] == "RELIANCE"
    assert body["fallback_used"] is False

def test_movers_and_search():
    code, body = _call({"action": "movers", "date_key": "Mon Oct 19 2026"})
    assert code == 200 and len(body["data"]["trending"]) == 8
    code, body = _call({"action": "search", "query": "bank"})
    assert code == 200 and 0 < len(body["data"]) <= 8

def test_nav_history_and_funds():
    code, body = _call({"action": "nav_history", "nav": 100, "months": 12, "seed": 3})
    assert code == 200 and body["data"][-1]["nav"] == 100
    code, body = _call({"action": "mutual_funds", "seed": 3})
    assert code == 200 and len(body["data"]["funds"]) == 6
    code, body = _call({"action": "fno", "seed": 3})
    assert code == 200 and body["data"]["summary"]["risk_level"] in {"Low", "Medium", "High"}

def test_bad_requests_are_400():
    assert _call({"action": "trade"})[0] == 400
    assert _call({"action": "quote", "symbol": ""})[0] == 400
    assert _call({"action": "quote"})[0] == 400
    code, body = _call({"action": "analysis", "symbol": "NOPE"})
    assert code == 400 and "Unknown symbol" in body["error"]
    code, body = _call({"action": "portfolio", "holdings": [{"symbol": "TCS", "quantity": 1, "avg_buy_price": 0}]})
    assert code == 400 and "avg_buy_price" in body["error"]

def test_unparseable_body_is_400():
    resp = handler({"body": "{not json"}, Ctx())
    assert resp["statusCode"] == 400

def test_unexpected_exception_is_500(monkeypatch):
    def boom(body):
        raise RuntimeError("boom")
    monkeypatch.setitem(lambda_handler.ROUTES, "portfolio", boom)
    code, body = _call({"action": "portfolio"})
    assert code == 500
    assert body["status"] == "error" and "RuntimeError: boom" in body["error"]
    assert "latency_ms" in body
