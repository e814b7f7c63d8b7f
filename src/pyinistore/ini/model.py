# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 23:02:51

"""
In-memory INI document: sections of key/value entries, plus comments.

Section names and keys are case-insensitive, but the spelling seen first is
what gets written back. Comments are kept verbatim (delimiter included) and
never interpreted.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Protocol

from .errors import InvalidNameError


def fold(name: str) -> str:
    return name.casefold()


class _Commented(Protocol):
    comments: list[str]
    inline: str | None


def _absorb_comments(dst: _Commented, src: _Commented) -> None:
    # comments of the overlay augment, never replace.
    dst.comments.extend(src.comments)
    if src.inline is None or src.inline == dst.inline:
        return
    if dst.inline is None:
        dst.inline = src.inline
    else:
        dst.comments.append(src.inline)


@dataclass
class IniEntry:
    key: str
    value: str
    comments: list[str] = field(default_factory=list)
    inline: str | None = None


class IniSection(MutableMapping[str, str]):
    """Ordered, case-insensitive `key: raw value` mapping.

    Overwriting a key keeps its position and comments. Use `entry()` or
    `entries()` to get at the comments themselves.
    """

    def __init__(
        self, name: str | None,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self.name = name
        self.comments: list[str] = []
        self.inline: str | None = None
        self._entries: dict[str, IniEntry] = {}
        if pairs:
            self.update(pairs)

    def __getitem__(self, key: str) -> str:
        return self._entries[fold(key)].value

    def __setitem__(self, key: str, value: str) -> None:
        if (entry := self._entries.get(fold(key))) is not None:
            entry.value = value
        else:
            self._entries[fold(key)] = IniEntry(key, value)

    def __delitem__(self, key: str) -> None:
        del self._entries[fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return (i.key for i in self._entries.values())

    def __str__(self) -> str:
        return f'[{self.name}]' if self.name is not None else '[]'

    def __repr__(self) -> str:
        return '%s { .cnt = %d }' % (self, len(self))

    def entry(self, key: str) -> IniEntry | None:
        return self._entries.get(fold(key))

    def entries(self) -> Iterator[IniEntry]:
        return iter(self._entries.values())

    def add_entry(self, entry: IniEntry) -> None:
        """Sets `entry` as if read from a file: an existing key takes the new
        value and gains its comments, a new key is appended (as a copy).
        """
        mine = self._entries.get(fold(entry.key))
        if mine is None:
            self._entries[fold(entry.key)] = deepcopy(entry)
            return
        mine.value = entry.value
        _absorb_comments(mine, entry)

    def merge(self, another: 'IniSection') -> None:
        _absorb_comments(self, another)
        for i in another.entries():
            self.add_entry(i)

    def clear_comments(self) -> None:
        self.comments.clear()
        self.inline = None
        for i in self._entries.values():
            i.comments.clear()
            i.inline = None


class IniDocument(MutableMapping[str, IniSection]):
    """... is an ordered group of `IniSection`s,
    representing a whole INI file.

    Keys before any `[section]` live in `self.header`.
    """

    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}
        self.header = IniSection(None)
        # comments after the last entry, nothing to attach them to.
        self.trailing_comments: list[str] = []

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[fold(key)]

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str]
    ) -> None:
        validate_section_name(key)
        # never keep a reference to someone else's section.
        if isinstance(value, IniSection):
            section = deepcopy(value)
            section.name = key
        else:
            section = IniSection(key, value)
        old = self.__raw.get(fold(key))
        if old is not None:
            section.name = old.name
        self.__raw[fold(key)] = section

    def __delitem__(self, key: str) -> None:
        del self.__raw[fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold(key) in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return (i.name for i in self.__raw.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return (
            dict(self.header) == dict(other.header)
            and [(k, dict(v)) for k, v in self.items()]
            == [(k, dict(v)) for k, v in other.items()])

    def __repr__(self) -> str:
        return 'IniDocument { .sections = %d }' % len(self)

    def setdefault(self, key: str, default=None) -> IniSection:
        """Returns section `key`, adding an empty one if it isn't there."""
        if key not in self:
            self[key] = default or {}
        return self[key]

    def sections(self) -> Iterator[IniSection]:
        return iter(self.__raw.values())

    def prune(self) -> list[str]:
        """Drops sections without entries; returns their names.

        Their comments move on to the next kept section,
        or to `trailing_comments` if none follows.
        """
        empty: list[str] = []
        carry: list[str] = []
        for i in self.__raw.values():
            if len(i):
                i.comments[:0] = carry
                carry = []
                continue
            empty.append(i.name)
            carry.extend(orphan_comments(i))
        self.trailing_comments[:0] = carry
        for i in empty:
            del self[i]
        return empty

    def merge(self, another: 'IniDocument') -> 'IniDocument':
        """To merge `another` into self, `another` winning on every key.

        Sections missing here are appended in `another`'s order.
        Nothing of `another` is shared afterwards.
        """
        self.header.merge(another.header)
        for section in another.sections():
            self.setdefault(section.name).merge(section)
        self.trailing_comments.extend(another.trailing_comments)
        return self

    def copy(self) -> 'IniDocument':
        return deepcopy(self)

    def clear_comments(self) -> None:
        self.header.clear_comments()
        for i in self.__raw.values():
            i.clear_comments()
        self.trailing_comments.clear()


def orphan_comments(section: IniSection) -> list[str]:
    """Comment lines of a section that won't be written, header inline
    comment included."""
    ret = list(section.comments)
    if section.inline is not None:
        ret.append(section.inline)
    return ret


def merge_documents(base: IniDocument, *overlays: IniDocument) -> IniDocument:
    """Returns a new document: `base` with `overlays` applied in order."""
    ret = base.copy()
    for i in overlays:
        ret.merge(i)
    return ret


_FORBIDDEN_IN_NAMES = ('\n', '\r', ';', '#')


def validate_key(key: str) -> None:
    if not isinstance(key, str) or not key.strip():
        raise InvalidNameError(f'Empty key: {key!r}.')
    if key != key.strip() or '=' in key or key.startswith('['):
        raise InvalidNameError(f'{key!r} would not read back as a key.')
    for i in _FORBIDDEN_IN_NAMES:
        if i in key:
            raise InvalidNameError(f'{key!r} would not read back as a key.')


def validate_section_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError(f'Empty section name: {name!r}.')
    if name != name.strip() or ']' in name:
        raise InvalidNameError(
            f'[{name}] would not read back as a section header.')
    for i in _FORBIDDEN_IN_NAMES:
        if i in name:
            raise InvalidNameError(
                f'[{name}] would not read back as a section header.')
