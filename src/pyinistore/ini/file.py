# -*- encoding: utf-8 -*-
# @File   : file.py
# @Time   : 2026/10/13 21:15:40

"""One INI file on disk, with typed access to its content.

    ```python
    ini = IniFile('Documents/My Games/Fallout 76/Fallout76Custom.ini',
                  default_path='defaults/Fallout76Custom.ini')
    ini.load()
    ini.set('Display', 'fDefaultFOV', 90.0)
    if not ini.file_has_been_modified():
        ini.save()
    ```

Not thread-safe: load/merge/save are expected to run one after another,
driven by whoever owns the instance.
"""

import logging
import os
from os import PathLike, fspath
from os.path import basename, exists

from .access import IniAccessor
from .errors import ConfigParseError, IniError, IniParseError
from .model import IniDocument
from .parser import IniParser
from ..fsattr import FileAttributes, StatFileAttributes


class IniFile(IniAccessor):
    def __init__(
        self,
        path: str | PathLike[str],
        default_path: str | PathLike[str] | None = None,
        *,
        attributes: FileAttributes | None = None,
        blank_lines: int = 1
    ) -> None:
        super().__init__()
        self.file_path = fspath(path)
        self.file_name = basename(self.file_path)
        # fallback to this path if `file_path` doesn't exist (to load defaults)
        self.default_path = (
            fspath(default_path) if default_path is not None else None)
        self._attributes = attributes or StatFileAttributes()
        self._parser = IniParser(self.file_path, blank_lines=blank_lines)
        self._last_modified: int | None = None

    def __repr__(self) -> str:
        return f'IniFile({self.file_path!r}, loaded={self.is_loaded()})'

    @property
    def is_read_only(self) -> bool:
        return self._attributes.is_read_only(self.file_path)

    @is_read_only.setter
    def is_read_only(self, value: bool) -> None:
        self.set_read_only(value)

    def set_read_only(self, read_only: bool) -> None:
        self._attributes.set_read_only(self.file_path, read_only)

    def _read(self, path: str) -> IniDocument:
        return IniParser(path).read()

    def load(self, ignore_errors: bool = False) -> None:
        """Loads `file_path` if it exists, else the defaults at
        `default_path`, else starts from an empty document.

        Raises `ConfigParseError` unless `ignore_errors` is set,
        in which case a broken file reads as an empty one.
        """
        if exists(self.file_path):
            path = self.file_path
        elif self.default_path is not None and exists(self.default_path):
            path = self.default_path
        else:
            path = None

        if path is None:
            logging.debug(f'{self.file_name} not found, starting empty.')
            self._data = IniDocument()
        else:
            try:
                self._data = self._read(path)
            except IniParseError as exc:
                if not ignore_errors:
                    raise ConfigParseError(path, exc) from exc
                logging.warning(f'Ignored broken {path}:\n  {exc}')
                self._data = IniDocument()
        self.update_last_modified()

    def load_default(self) -> None:
        """Resets the content to `default_path`, or to nothing.
        Never raises."""
        self._data = IniDocument()
        if self.default_path is not None and exists(self.default_path):
            try:
                self._data = self._read(self.default_path)
            except (IniError, OSError) as exc:
                logging.warning(
                    f'Unable to read defaults {self.default_path}:\n  {exc}')
        self.update_last_modified()

    def save(self) -> None:
        """Writes the document back, even over a read-only file
        (which stays read-only afterwards). Does nothing if not loaded."""
        if self._data is None:
            return

        self._data.prune()
        state = self._attributes.snapshot(self.file_path)
        self.set_read_only(False)
        try:
            self._parser.write(self._data)
        finally:
            self._attributes.restore(self.file_path, state)
        self.update_last_modified()

    def merge(self, another: 'IniFile | IniDocument') -> None:
        """Merges `another` into this file's content, overwriting existing
        values. Comments get appended."""
        if self._data is None:
            raise IniError(f'{self.file_name} has not been loaded.')
        if isinstance(another, IniFile):
            if another.data is None:
                return
            another = another.data
        self._data.merge(another)

    def _get_last_modified(self) -> int | None:
        try:
            return os.stat(self.file_path).st_mtime_ns
        except FileNotFoundError:
            return None

    def update_last_modified(self) -> None:
        self._last_modified = self._get_last_modified()

    def file_has_been_modified(self) -> bool:
        """Whether the file changed since the last load/save.

        Only compares modification times: a rewrite within the
        filesystem's timestamp granularity goes unnoticed, and a mere
        `touch` counts as a change.
        """
        return self._last_modified != self._get_last_modified()

    def clear_all_comments(self) -> None:
        if self._data is not None:
            self._data.clear_comments()
