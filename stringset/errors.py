from __future__ import annotations

from typing import Any


class StringSetError(Exception):
    """Base class for errors raised by the stringset package."""


class ParseError(StringSetError, ValueError):
    """Raised when a wire payload is not a JSON array of strings or ``null``."""

    def __init__(self, reason: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(f"stringset: cannot parse payload: {reason}")
        self.reason = reason
        self.errors: list[dict[str, Any]] = list(errors or [])


__all__ = ["ParseError", "StringSetError"]
