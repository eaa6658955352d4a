"""
Value-shape predicates used by model validation.

These inspect Python types explicitly:
  - booleans are never numbers or integers
  - NaN / infinity are not numeric
  - a string counts as numeric when it parses as a finite float
"""
from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from typing import Any


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """True for ints and for finite floats without a fractional part."""
    if not _is_real(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    number = float(value)
    return math.isfinite(number) and number.is_integer()


def to_number(value: Any) -> float | None:
    """Return *value* as a finite float, or None if it is not numeric."""
    if _is_real(value):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def is_numeric(value: Any) -> bool:
    return to_number(value) is not None
