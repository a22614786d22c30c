from stringset.errors import ParseError, StringSetError
from stringset.string_set import (
    StringSet,
    add_to,
    contains,
    debug_display,
    display,
    dumps,
    equal,
    join,
    length,
    loads,
    new,
    remove,
    values,
)


__all__ = [
    "ParseError",
    "StringSet",
    "StringSetError",
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
