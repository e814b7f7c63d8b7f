# -*- encoding: utf-8 -*-
# @File   : snapshot.py
# @Time   : 2026/10/14 01:08:26

"""YAML snapshots of INI documents, handy to diff or share a set of tweaks.

A snapshot is a two-document YAML stream: some metadata first, then the
values as `{section: {key: value}}`. Keys before any section go under the
`''` section, a name no real INI header can have. Comments are not kept.
"""

from os import PathLike
from time import localtime, strftime
from typing import TypedDict

import yaml

from .errors import IniParseError
from .model import IniDocument
from ..abstract import FileHandler

HEADER_SECTION = ''


class _YamlMetaPack(TypedDict):
    source: str | None
    created: str
    sections: int
    entries: int


class IniYamlHandler(FileHandler[IniDocument]):
    def __init__(
        self,
        filename: str | PathLike[str],
        source: str | None = None
    ) -> None:
        """`source` names the INI file a snapshot is taken from."""
        super().__init__(filename)
        self._source = source

    @staticmethod
    def to_dict(instance: IniDocument) -> dict[str, dict[str, str]]:
        ret: dict[str, dict[str, str]] = {}
        if len(instance.header):
            ret[HEADER_SECTION] = dict(instance.header)
        for section in instance.sections():
            ret[section.name] = dict(section)
        return ret

    @staticmethod
    def from_dict(data: dict[str, dict[str, object]]) -> IniDocument:
        ret = IniDocument()
        for name, pairs in (data or {}).items():
            # name / pairs may come back as non-str from a hand-edited file.
            target = (
                ret.header if name in (HEADER_SECTION, None)
                else ret.setdefault(str(name)))
            for k, v in (pairs or {}).items():
                target[str(k)] = '' if v is None else str(v)
        return ret

    def read(self) -> IniDocument:
        """Also takes a file without metadata (just the values),
        an empty file reads as an empty document."""
        with open(self._fn, 'r', encoding='utf-8') as fp:
            docs = list(yaml.load_all(fp.read(), yaml.SafeLoader))
        if len(docs) > 2:
            raise IniParseError(
                f'Expected metadata and values, got {len(docs)} '
                'YAML documents.', path=self._fn)
        data = docs[-1] if docs else None
        if data is not None and not isinstance(data, dict):
            raise IniParseError(
                'Values must be a mapping of sections.', path=self._fn)
        return self.from_dict(data)

    def write(self, instance: IniDocument) -> None:
        body = self.to_dict(instance)
        meta = _YamlMetaPack(
            source=self._source,
            created=strftime("%Y-%m-%d %H:%M:%S", localtime()),
            sections=len(instance),
            entries=sum(len(i) for i in body.values()))
        with open(self._fn, 'w', encoding='utf-8') as fp:
            yaml.safe_dump_all(
                [dict(meta), body], fp,
                allow_unicode=True, sort_keys=False,
                default_flow_style=False)
