"""
JSON wire format of a string set.

A set travels as a JSON array of strings, sorted, or as ``null`` when it has
no members. Nothing else is accepted on input.

Lone surrogates cannot be encoded as UTF-8: ``encode`` writes them as U+FFFD,
and ``decode`` rejects ``\\uD800``-style escapes that do not form a pair.
"""

from __future__ import annotations

import re

from pydantic import StrictStr, TypeAdapter, ValidationError
from structlog.typing import FilteringBoundLogger

from stringset.errors import ParseError
from stringset.logger import get_logger


_WIRE: TypeAdapter[list[str] | None] = TypeAdapter(list[StrictStr] | None)
_SURROGATE = re.compile("[\ud800-\udfff]")

log: FilteringBoundLogger = get_logger("stringset.codec")


def scrub(values: list[str] | None) -> list[str] | None:
    """Replace lone surrogates with U+FFFD so the values can be written as UTF-8."""
    if values is None:
        return None
    return [_SURROGATE.sub("\ufffd", value) for value in values]


def encode(values: list[str] | None) -> str:
    """Compact JSON, e.g. ``["1a","2b"]`` or ``null``."""
    return _WIRE.dump_json(scrub(values)).decode("utf-8")


def decode(data: str | bytes | bytearray) -> list[str] | None:
    """
    Parse a wire payload.

    :return: the listed strings in payload order (duplicates kept), or ``None`` for ``null``
    :raises ParseError: malformed JSON or anything but an array of strings / ``null``
    """
    try:
        return _WIRE.validate_json(data, strict=True)
    except ValidationError as exc:
        log.debug("stringset.parse_failed", error_count=exc.error_count(), error=str(exc))
        raise ParseError(str(exc), errors=exc.errors(include_url=False)) from exc
    except UnicodeError as exc:
        # str payload holding a raw lone surrogate
        log.debug("stringset.parse_failed", error_count=1, error=str(exc))
        raise ParseError(str(exc)) from exc


__all__ = ["decode", "encode", "scrub"]
