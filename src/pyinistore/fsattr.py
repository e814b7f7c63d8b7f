# -*- encoding: utf-8 -*-
# @File   : fsattr.py
# @Time   : 2026/10/13 20:52:08

"""The read-only flag of a file, behind a tiny interface.

`IniFile` only ever talks to a `FileAttributes`, so tests (or a platform
with its own notion of "read-only") can hand in something else.
"""

import os
import stat
from abc import ABCMeta, abstractmethod

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


class FileAttributes(metaclass=ABCMeta):
    @abstractmethod
    def is_read_only(self, path: str) -> bool:
        """`False` for a file that doesn't exist."""
        raise NotImplementedError

    @abstractmethod
    def set_read_only(self, path: str, read_only: bool) -> None:
        """No-op for a file that doesn't exist."""
        raise NotImplementedError

    def snapshot(self, path: str) -> object:
        """Whatever `restore()` needs to put the attributes back as they are
        now. The read-only flag unless a subclass knows better."""
        return self.is_read_only(path)

    def restore(self, path: str, state: object) -> None:
        self.set_read_only(path, bool(state))


class StatFileAttributes(FileAttributes):
    """Read-only means "the owner has no write permission".

    On Windows `os.chmod` only flips the read-only attribute,
    which is exactly what we want there.
    """

    def is_read_only(self, path: str) -> bool:
        if not os.path.exists(path):
            return False
        return not os.stat(path).st_mode & stat.S_IWUSR

    def set_read_only(self, path: str, read_only: bool) -> None:
        if not os.path.exists(path):
            return
        mode = stat.S_IMODE(os.stat(path).st_mode)
        if read_only:
            mode &= ~_WRITE_BITS
        else:
            mode |= stat.S_IWUSR
        os.chmod(path, mode)

    def snapshot(self, path: str) -> int | None:
        """The exact permission bits, `None` for a missing file."""
        if not os.path.exists(path):
            return None
        return stat.S_IMODE(os.stat(path).st_mode)

    def restore(self, path: str, state: object) -> None:
        if state is None or not os.path.exists(path):
            return
        os.chmod(path, state)
