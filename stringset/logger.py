from __future__ import annotations

from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import FilteringBoundLogger, Processor

from stringset.config import LoggingSettings, get_settings


def configure_logging(settings: LoggingSettings | None = None) -> str:
    """
    Configure structlog for the process and bind a fresh run_id.

    The library never calls this itself; applications do, once at startup.
    """
    cfg = settings or get_settings().logging

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if cfg.json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(cfg.level_no),
        cache_logger_on_first_use=False,
    )

    run_id = uuid4().hex
    clear_contextvars()
    bind_contextvars(run_id=run_id)
    return run_id


def get_logger(name: str) -> FilteringBoundLogger:
    # Lazy proxy: picks up configure_logging() even when created at import time.
    return structlog.get_logger(logger_name=name)


__all__ = ["configure_logging", "get_logger"]
