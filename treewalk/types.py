"""Integer model for the treewalk language.

The language has a single value type: a 32-bit signed integer. Arithmetic
results wrap around using two's complement, like a Java or C `int`.
This module holds the width constants and the helpers the rest of the
package uses to validate and normalize values.
"""

from __future__ import annotations

from typing import Any


INT_BITS = 32
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1

_MODULUS = 1 << INT_BITS


def wrap_int(value: int) -> int:
    """Reduce an arbitrary Python int to the signed 32-bit range.

    >>> wrap_int(INT_MAX + 1) == INT_MIN
    True
    """
    value &= _MODULUS - 1
    if value > INT_MAX:
        value -= _MODULUS
    return value


def check_int(value: Any) -> int:
    """Return `value` if it is a valid language integer, else raise."""
    # bool is an int subclass but is not a language value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'expected Integer, got {type(value).__name__}')
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f'integer {value} out of range [{INT_MIN}, {INT_MAX}]')
    return value


def truncating_div(a: int, b: int) -> int:
    # Python's // floors; the language truncates toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def is_truthy(value: int) -> bool:
    return value != 0
