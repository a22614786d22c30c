from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog
from structlog.contextvars import clear_contextvars

from stringset.config import get_settings


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    structlog.reset_defaults()
    clear_contextvars()
    yield
    structlog.reset_defaults()
    clear_contextvars()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for k in ("STRINGSET_LOG_LEVEL", "STRINGSET_LOG_JSON"):
        monkeypatch.delenv(k, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
