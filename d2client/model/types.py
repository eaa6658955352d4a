"""
Type tags for model properties and the type check each one enforces.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from d2client.core.check import is_array, is_integer, is_numeric, is_object, is_string


class TypeTag(str, Enum):
    INTEGER = "INTEGER"
    NUMBER = "NUMBER"
    COLLECTION = "COLLECTION"
    PHONENUMBER = "PHONENUMBER"
    EMAIL = "EMAIL"
    URL = "URL"
    COLOR = "COLOR"
    PASSWORD = "PASSWORD"
    IDENTIFIER = "IDENTIFIER"
    TEXT = "TEXT"
    COMPLEX = "COMPLEX"
    DATE = "DATE"
    REFERENCE = "REFERENCE"
    BOOLEAN = "BOOLEAN"
    CONSTANT = "CONSTANT"

    @classmethod
    def parse(cls, tag: Any) -> TypeTag | None:
        """Return the member for *tag*, or None when it is not a known tag."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except (ValueError, TypeError):
            return None

    def accepts(self, value: Any) -> bool:
        return _TYPE_CHECKS[self](value)


def _always(value: Any) -> bool:
    return True


_TYPE_CHECKS: dict[TypeTag, Callable[[Any], bool]] = {
    TypeTag.INTEGER: is_integer,
    TypeTag.NUMBER: is_numeric,
    TypeTag.COLLECTION: is_array,
    TypeTag.PHONENUMBER: is_string,
    TypeTag.EMAIL: is_string,
    TypeTag.URL: is_string,
    TypeTag.COLOR: is_string,
    TypeTag.PASSWORD: is_string,
    TypeTag.IDENTIFIER: is_string,
    TypeTag.TEXT: is_string,
    TypeTag.COMPLEX: is_object,
    # No type enforcement for these
    TypeTag.DATE: _always,
    TypeTag.REFERENCE: _always,
    TypeTag.BOOLEAN: _always,
    TypeTag.CONSTANT: _always,
}

_missing = set(TypeTag) - set(_TYPE_CHECKS)
if _missing:
    raise RuntimeError(f"No type check registered for: {', '.join(sorted(_missing))}")
