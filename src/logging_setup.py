"""
Structured logging setup for Lambda & local development.

PURPOSE:
- One JSON log line per event, queryable in CloudWatch Insights.
- Request identifiers are bound as context variables by the handler, so log lines
  from deeper layers (pipeline fallbacks, state writes) carry them too.

CONTEXT:
- Called once per process by the handler and the local CLI; other modules just use
  structlog.get_logger() and bind their own component.
"""

from __future__ import annotations
import logging
import os
import sys
import structlog

from src.utils.market_calendar import TZ

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(component: str = "handler"):
    """
    Configure JSON logging and return a logger for `component`.

    returns:
    - structlog.BoundLogger – bound with service, env, component and market_tz.

    behaviour:
    - LOG_LEVEL picks the stdlib level (default INFO); unknown names fall back to INFO.
    - Output goes to stdout, which Lambda forwards to CloudWatch.
    - Safe to call more than once; the last call wins.

    example log entry:
    {
      "event": "analysis.fallback_used",
      "level": "warning",
      "timestamp": "2026-10-19T03:45:00.000000Z",
      "service": "StockAI",
      "component": "pipeline",
      "market_tz": "Asia/Kolkata",
      "correlation_id": "corr-1",
      "symbol": "TCS"
    }
    """
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.processors.JSONRenderer(ensure_ascii=False)],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger().bind(
        service="StockAI",
        env=os.getenv("ENV", "dev"),
        component=component,
        market_tz=TZ.key,
    )


def bind_request(request_id: str, correlation_id: str) -> None:
    """Reset per-request context and attach the identifiers to every log line."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, correlation_id=correlation_id)
