# -*- encoding: utf-8 -*-
# @File   : values.py
# @Time   : 2026/10/12 22:11:05

"""Invariant text <-> value conversions.

Every `try_parse_*` returns `None` instead of raising, so that getters with a
default never depend on catching anything. Numbers are always written with
`.` as decimal point, no thousands separators and no exponent, whatever the
host locale says.
"""

import math
import re
from decimal import Decimal

INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1
UINT_MIN, UINT_MAX = 0, 2 ** 32 - 1
LONG_MIN, LONG_MAX = -2 ** 63, 2 ** 63 - 1

TRUE, FALSE = '1', '0'
VALID_BOOL_VALUES = (TRUE, FALSE, '')

# `\d` would also accept non-ASCII digits.
_INTEGER = re.compile(r'[+-]?[0-9]+')
_DECIMAL = re.compile(
    r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def _try_parse_ranged(text: str, lower: int, upper: int) -> int | None:
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if value < lower or value > upper:
        return None
    return value


def try_parse_int(text: str) -> int | None:
    """Signed 32-bit."""
    return _try_parse_ranged(text, INT_MIN, INT_MAX)


def try_parse_uint(text: str) -> int | None:
    """Unsigned 32-bit."""
    return _try_parse_ranged(text, UINT_MIN, UINT_MAX)


def try_parse_long(text: str) -> int | None:
    """Signed 64-bit."""
    return _try_parse_ranged(text, LONG_MIN, LONG_MAX)


def try_parse_float(text: str) -> float | None:
    text = text.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    # e.g. "1e999"
    if not math.isfinite(value):
        return None
    return value


def try_parse_bool(text: str) -> bool | None:
    if text not in VALID_BOOL_VALUES:
        return None
    return text == TRUE


def format_bool(value: bool) -> str:
    return TRUE if value else FALSE


def format_int(value: int) -> str:
    return str(int(value))


def format_float(value: float) -> str:
    """Shortest text that reads back as the same double, e.g.
    `80.0 -> '80'`, `1e-07 -> '0.0000001'`, `0.1 -> '0.1'`.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f'{value!r} has no invariant decimal form.')
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


def format_value(value: bool | int | float | str) -> str:
    """Turns a setter argument into the raw string the document stores."""
    # bool first, it is an int as well.
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, int):
        return format_int(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return value
    raise TypeError(
        f'Unable to store {type(value).__name__} values, '
        'expected str, bool, int or float.')
