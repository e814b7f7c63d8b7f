# -*- encoding: utf-8 -*-
# @File   : access.py
# @Time   : 2026/10/13 19:26:33

"""Typed get/set over an owned `IniDocument`.

Getters come in two flavours, picked by whether `default` is passed:

- strict: `get_int('Display', 'iSize H')` raises `KeyNotFoundError`
  if the key isn't there.
- lenient: `get_int('Display', 'iSize H', default=1080)` returns the default
  when the key is missing *or* its value makes no sense as an int.

`section=None` addresses the keys found before any `[section]`.
"""

from collections.abc import Callable
from typing import Any, TypeVar
from warnings import warn

from . import values
from .errors import IniValueError, KeyNotFoundError, NotLoadedError
from .model import IniDocument, IniSection, validate_key
from .parser import COMMENT_DELIMITERS

T = TypeVar('T')

_MISSING: Any = object()


class IniAccessor:
    def __init__(self, data: IniDocument | None = None) -> None:
        self._data: IniDocument | None = data

    @property
    def data(self) -> IniDocument | None:
        """The owned document, `None` until something got loaded."""
        return self._data

    def is_loaded(self) -> bool:
        return self._data is not None

    def _section(self, section: str | None) -> IniSection | None:
        if self._data is None:
            return None
        if section is None:
            return self._data.header
        return self._data.get(section)

    def exists(self, section: str | None, key: str) -> bool:
        sect = self._section(section)
        return sect is not None and key in sect

    def get_string(
        self, section: str | None, key: str, default: str = _MISSING
    ) -> str:
        sect = self._section(section)
        if sect is None or key not in sect:
            if default is _MISSING:
                raise KeyNotFoundError(section, key)
            return default
        return sect[key]

    def get_bool(
        self, section: str | None, key: str, default: bool = _MISSING
    ) -> bool:
        if default is _MISSING:
            # "equals 1", garbage simply reads as False.
            return self.get_string(section, key) == values.TRUE
        value = values.try_parse_bool(
            self.get_string(section, key, values.format_bool(default)))
        return default if value is None else value

    def _get_typed(
        self, section: str | None, key: str, default: T,
        parse: Callable[[str], T | None], expected: str
    ) -> T:
        if default is _MISSING:
            raw = self.get_string(section, key)
            value = parse(raw)
            if value is None:
                raise IniValueError(section, key, raw, expected)
            return value
        if not self.exists(section, key):
            return default
        value = parse(self.get_string(section, key))
        return default if value is None else value

    def get_int(
        self, section: str | None, key: str, default: int = _MISSING
    ) -> int:
        return self._get_typed(
            section, key, default, values.try_parse_int, 'int')

    def get_uint(
        self, section: str | None, key: str, default: int = _MISSING
    ) -> int:
        return self._get_typed(
            section, key, default, values.try_parse_uint, 'uint')

    def get_long(
        self, section: str | None, key: str, default: int = _MISSING
    ) -> int:
        return self._get_typed(
            section, key, default, values.try_parse_long, 'long')

    def get_float(
        self, section: str | None, key: str, default: float = _MISSING
    ) -> float:
        return self._get_typed(
            section, key, default, values.try_parse_float, 'float')

    def set(
        self, section: str | None, key: str,
        value: str | bool | int | float
    ) -> None:
        """Creates `[section]` if needed and stores `value` under `key`.

        Raises `NotLoadedError` when nothing has been loaded yet.
        """
        if self._data is None:
            raise NotLoadedError(section, key)
        validate_key(key)
        raw = values.format_value(value)
        if '\n' in raw or '\r' in raw:
            raise ValueError(f'[{section or ""}] {key}: multi-line values '
                             'are not supported.')
        if any(i in raw for i in COMMENT_DELIMITERS):
            warn(f'[{section or ""}] {key}={raw} contains a comment '
                 'delimiter, everything after it will be lost on reload.')
        if raw != raw.strip():
            warn(f'[{section or ""}] {key}={raw!r} has surrounding whitespace, '
                 'it will be stripped on reload.')
        sect = (
            self._data.header if section is None
            else self._data.setdefault(section))
        sect[key] = raw

    def remove(self, section: str | None, key: str) -> None:
        sect = self._section(section)
        if sect is not None and key in sect:
            del sect[key]
