import json

import structlog

from src import lambda_handler
from src.lambda_handler import handler
from src.logging_setup import bind_request, configure_logging

class Ctx:
    aws_request_id = "req-123"

class RecordingLog:
    def __init__(self):
        self.events = []
    def _rec(self, level):
        return lambda event, **kw: self.events.append((level, event, kw))
    def __getattr__(self, name):
        if name in ("info", "warning", "error"):
            return self._rec(name)
        raise AttributeError(name)

def test_configure_logging_binds_service_context(monkeypatch):
    monkeypatch.setenv("ENV", "test")
    ctx = configure_logging(component="cli")._context
    assert (ctx["service"], ctx["env"], ctx["component"]) == ("StockAI", "test", "cli")
    assert ctx["market_tz"] == "Asia/Kolkata"

def test_bind_request_replaces_previous_ids():
    bind_request("a", "b")
    structlog.contextvars.bind_contextvars(symbol="TCS")
    bind_request("c", "d")
    assert structlog.contextvars.get_contextvars() == {"request_id": "c", "correlation_id": "d"}

def test_success_binds_ids_and_logs_latency(monkeypatch):
    rec = RecordingLog()
    monkeypatch.setattr(lambda_handler, "log", rec)
    handler({"body": json.dumps({"action": "quote", "symbol": "TCS"}),
             "headers": {"x-correlation-id": "corr-abc"}}, Ctx())
    assert structlog.contextvars.get_contextvars() == {"request_id": "req-123", "correlation_id": "corr-abc"}
    level, event, kw = rec.events[-1]
    assert (level, event, kw["action"]) == ("info", "response.success", "quote")
    assert "latency_ms" in kw

def test_bad_request_logs_warning(monkeypatch):
    rec = RecordingLog()
    monkeypatch.setattr(lambda_handler, "log", rec)
    handler({"body": "{}"}, Ctx())
    assert rec.events[-1][:2] == ("warning", "response.bad_request")
    assert "action" in rec.events[-1][2]["error"]

def test_exception_logs_traceback(monkeypatch):
    rec = RecordingLog()
    monkeypatch.setattr(lambda_handler, "log", rec)
    def boom(body):
        raise RuntimeError("boom")
    monkeypatch.setitem(lambda_handler.ROUTES, "movers", boom)
    handler({"body": json.dumps({"action": "movers"})}, Ctx())
    level, event, kw = rec.events[-1]
    assert (level, event, kw["error"]) == ("error", "response.error", "boom")
    assert "RuntimeError" in kw["traceback"]
