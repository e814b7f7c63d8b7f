# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:30:42

"""Errors raised by the INI store.

Structural failures (a file that won't parse, a key a strict getter can't
find) surface as the types below. Value coercion failures never do when the
caller supplied a default, see `ini.values`.
"""


class IniError(Exception):
    """Base of every error raised by `pyinistore`."""


class IniParseError(IniError):
    """Raw text couldn't be turned into an `IniDocument`."""

    def __init__(
        self, message: str, *,
        path: str | None = None,
        lineno: int | None = None,
        line: str | None = None
    ) -> None:
        self.path = path
        self.lineno = lineno
        self.line = line
        where = path or '<string>'
        if lineno is not None:
            where += f':{lineno}'
        detail = f'{where}: {message}'
        if line is not None:
            detail += f'\n  {line!r}'
        super().__init__(detail)


class ConfigParseError(IniError):
    """Raised by `IniFile.load()` when the file on disk is malformed."""

    def __init__(self, path: str, cause: IniParseError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f'{path} couldn\'t be parsed: {cause}')


class KeyNotFoundError(IniError, KeyError):
    def __init__(self, section: str | None, key: str, message: str = '') -> None:
        self.section = section
        self.key = key
        super().__init__(
            message or f"Couldn't find [{section or ''}] {key} in any *.ini file.")

    # KeyError.__str__ would repr() the message.
    def __str__(self) -> str:
        return str(self.args[0])


class NotLoadedError(KeyNotFoundError):
    """Write access to a store that has no document yet."""

    def __init__(self, section: str | None, key: str) -> None:
        super().__init__(
            section, key,
            f"Couldn't assign [{section or ''}] {key}: nothing has been loaded.")


class IniValueError(IniError, ValueError):
    """A strict numeric getter met a value it can't convert."""

    def __init__(
        self, section: str | None, key: str, value: str, expected: str
    ) -> None:
        self.section = section
        self.key = key
        self.value = value
        super().__init__(
            f'[{section or ""}] {key}={value} is not a valid {expected}.')


class InvalidNameError(IniError, ValueError):
    """A key or section name that can't survive a write/read cycle."""
