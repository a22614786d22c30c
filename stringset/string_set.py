"""
Set of strings with a deterministic external form.

A ``StringSet`` may be *uninitialized*: it has no backing storage until the
first ``add``. Every read treats it as empty, so ``StringSet()`` is a safe
default for dataclass and pydantic fields. The module level functions accept
``None`` in place of a set and give it the same meaning.

Members are unordered internally. Reads that expose them (``values``, ``join``,
iteration, JSON, formatting) sort on every call.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from pydantic_core.core_schema import SerializationInfo

from stringset import codec


class StringSet:
    """Mutable set of unique strings; ``str`` gives ``[a b]``, ``repr`` gives ``StringSet{"a", "b"}``."""

    __slots__ = ("_members",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[str] | None = None) -> None:
        if isinstance(values, str):
            raise TypeError("StringSet() takes an iterable of strings, not a str; use StringSet.new()")
        # None = uninitialized, no storage until the first add().
        self._members: set[str] | None = set(values) if values is not None else None

    @classmethod
    def new(cls, *values: str) -> StringSet:
        """Allocated set holding the unique ``values``; allocated even when empty."""
        return cls(values)

    @property
    def is_nil(self) -> bool:
        return self._members is None

    # ---------- mutation ----------
    def add(self, *values: str) -> StringSet:
        """Add ``values``, allocating storage in place if needed. Returns ``self`` for chaining."""
        if self._members is None:
            self._members = set()
        self._members.update(values)
        return self

    def remove(self, *values: str) -> StringSet:
        """Drop ``values`` that are present. Never allocates. Returns ``self`` for chaining."""
        if self._members is not None:
            for value in values:
                self._members.discard(value)
        return self

    # ---------- queries ----------
    def __len__(self) -> int:
        return len(self._members) if self._members is not None else 0

    def __contains__(self, value: object) -> bool:
        return self._members is not None and value in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self.values() or ())

    def equal(self, other: StringSet | None) -> bool:
        """Same membership; nil and empty sets are all equal."""
        if len(self) != length(other):
            return False
        if not self._members:
            return True
        return all(value in other for value in self._members)  # type: ignore[operator]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringSet):
            return NotImplemented
        return self.equal(other)

    def values(self) -> list[str] | None:
        """Members sorted ascending, or ``None`` when there are none (never ``[]``)."""
        if not self._members:
            return None
        return sorted(self._members)

    def join(self, sep: str) -> str:
        return sep.join(self.values() or ())

    # ---------- JSON ----------
    def to_json(self) -> str:
        return codec.encode(self.values())

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> StringSet:
        """Parse a payload; ``null`` gives an uninitialized set. Raises ``ParseError``."""
        return cls(codec.decode(data))

    def load_json(self, data: str | bytes | bytearray) -> StringSet:
        """Replace the members from a payload in place; untouched if it raises ``ParseError``."""
        decoded = codec.decode(data)
        self._members = set(decoded) if decoded is not None else None
        return self

    # ---------- formatting ----------
    def __str__(self) -> str:
        return "[" + self.join(" ") + "]"

    def debug_string(self) -> str:
        values = self.values()
        if values is None:
            return "StringSet(nil)"
        quoted = ", ".join(json.dumps(value, ensure_ascii=False) for value in values)
        return "StringSet{" + quoted + "}"

    def __repr__(self) -> str:
        return self.debug_string()

    def __format__(self, format_spec: str) -> str:
        # "#" selects the debug form, the rest of the spec pads/aligns as for str.
        if format_spec.startswith("#"):
            return format(self.debug_string(), format_spec[1:])
        return format(str(self), format_spec)

    # ---------- pydantic ----------
    @classmethod
    def _from_wire(cls, values: list[str] | None) -> StringSet:
        return cls(values)

    @staticmethod
    def _to_wire(value: StringSet, info: SerializationInfo) -> list[str] | None:
        if info.mode_is_json():
            return codec.scrub(value.values())
        return value.values()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_wire = core_schema.no_info_after_validator_function(
            cls._from_wire,
            core_schema.nullable_schema(
                core_schema.list_schema(core_schema.str_schema(strict=True))
            ),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_wire,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_wire]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._to_wire, info_arg=True
            ),
        )


# ---------- nil-aware functions ----------
def new(*values: str) -> StringSet:
    return StringSet.new(*values)


def add_to(s: StringSet | None, *values: str) -> StringSet:
    """Add ``values`` to ``s``; a ``None`` set is replaced by a new one. Reassign the result."""
    if s is None:
        s = StringSet()
    return s.add(*values)


def remove(s: StringSet | None, *values: str) -> StringSet | None:
    if s is None:
        return None
    return s.remove(*values)


def length(s: StringSet | None) -> int:
    return len(s) if s is not None else 0


def contains(s: StringSet | None, value: str) -> bool:
    return s is not None and value in s


def equal(a: StringSet | None, b: StringSet | None) -> bool:
    if a is None:
        return length(b) == 0
    return a.equal(b)


def values(s: StringSet | None) -> list[str] | None:
    return s.values() if s is not None else None


def join(s: StringSet | None, sep: str) -> str:
    return s.join(sep) if s is not None else ""


def dumps(s: StringSet | None) -> str:
    return codec.encode(values(s))


def loads(data: str | bytes | bytearray) -> StringSet | None:
    """Parse a payload; ``null`` gives ``None``, any array an allocated set."""
    decoded = codec.decode(data)
    return StringSet(decoded) if decoded is not None else None


def display(s: StringSet | None) -> str:
    return str(s) if s is not None else "[]"


def debug_display(s: StringSet | None) -> str:
    return s.debug_string() if s is not None else "StringSet(nil)"


__all__ = [
    "StringSet",
    "add_to",
    "contains",
    "debug_display",
    "display",
    "dumps",
    "equal",
    "join",
    "length",
    "loads",
    "new",
    "remove",
    "values",
]
