# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 00:40:19

"""Reading and writing INI files the way the game's engine expects them.

The engine ships (and reads) UTF-8 files without BOM, and players edit them
by hand, so the grammar is generous:

    ```ini
    bKeyBeforeAnySection=1   ; lands in `IniDocument.header`
    # comments start with ";" or "#", also inline.
    [Display]
    iSize W = 1920
    [display]                ; same section, entries get merged
    iSize W=2560             ; same key, last one wins
    ```

What it won't guess about is a line that is none of blank, comment,
`[section]` or `key=value`. That fails the whole parse with `IniParseError`.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike, fspath
from os.path import exists
from warnings import warn

import chardet

from .errors import IniParseError, InvalidNameError
from .model import IniDocument, IniEntry, IniSection, orphan_comments
from ..abstract import FileHandler

COMMENT_DELIMITERS = (';', '#')
UTF8_BOM = b'\xef\xbb\xbf'


def split_comment(line: str) -> tuple[str, str | None]:
    """`'a=b ;c' -> ('a=b ', ';c')`. Values can't contain `;` or `#`."""
    cut = min(
        (i for i in (line.find(j) for j in COMMENT_DELIMITERS) if i >= 0),
        default=-1)
    if cut < 0:
        return line, None
    return line[:cut], line[cut:].rstrip()


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], *, blank_lines: int = 1
    ) -> None:
        super().__init__(filename)
        self._blank_lines = blank_lines

    @staticmethod
    def readstream(
        buf: TextIOBase,
        ins: IniDocument | None = None,
        source: str | None = None
    ) -> IniDocument:
        """Reads an already decoded text stream into `ins` (or a new document).

        `source` only goes into error messages.
        """
        if ins is None:
            ins = IniDocument()
        this_sect: IniSection = ins.header
        pending: list[str] = []
        lineno = 0
        while i := buf.readline():
            lineno += 1
            content, comment = split_comment(i)
            content = content.strip()
            if not content:
                if comment is not None:
                    pending.append(comment)
                continue

            if content[0] == '[':
                name = content[1:-1].strip()
                if content[-1] != ']' or not name:
                    raise IniParseError(
                        'Malformed section header.',
                        path=source, lineno=lineno, line=i.rstrip('\r\n'))
                decl = IniSection(name)
                decl.comments, decl.inline = pending, comment
                try:
                    this_sect = ins.setdefault(name)
                except InvalidNameError as exc:
                    raise IniParseError(
                        str(exc), path=source, lineno=lineno,
                        line=i.rstrip('\r\n')) from exc
                # a repeated header brings its comments along.
                this_sect.merge(decl)
            elif '=' in content:
                key, val = content.split('=', 1)
                key = key.strip()
                if not key:
                    raise IniParseError(
                        'Missing key before "=".',
                        path=source, lineno=lineno, line=i.rstrip('\r\n'))
                this_sect.add_entry(
                    IniEntry(key, val.strip(), pending, comment))
            else:
                raise IniParseError(
                    'Unknown file format. Couldn\'t parse the line.',
                    path=source, lineno=lineno, line=i.rstrip('\r\n'))
            pending = []
        ins.trailing_comments.extend(pending)
        return ins

    @classmethod
    def loads(cls, text: str, source: str | None = None) -> IniDocument:
        return cls.readstream(StringIO(text), source=source)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()
        # tolerated on read, never written.
        if raw.startswith(UTF8_BOM):
            raw = raw[len(UTF8_BOM):]

        try:
            buf = raw.decode('utf-8')
        except UnicodeDecodeError as exc:
            codec = chardet.detect(raw)
            guess = (
                f' (looks like {codec["encoding"]})'
                if codec and codec['encoding'] and codec['confidence'] >= 0.8
                else '')
            raise IniParseError(
                f'Not a UTF-8 file{guess}: {exc.reason} '
                f'at byte {exc.start}.', path=filename) from exc
        # `newline=None` folds "\r\n" and "\r" into "\n".
        return StringIO(buf, newline=None)

    def read(self) -> IniDocument:
        """Reads the file this parser was created for."""
        logging.debug(f'Reading {self._fn}')
        return self.readstream(self._decode_file(self._fn), source=self._fn)

    def readfiles(
        self,
        instance: IniDocument | None = None,
        *layers: str | PathLike[str]
    ) -> IniDocument:
        """Reads this parser's file (unless `instance` is given),
        then merges every file of `layers` on top of it, in order.

        Later layers override earlier ones. Missing layers are skipped.
        """
        if instance is None:
            instance = self.read()
        for i in layers:
            i = fspath(i)
            if not exists(i):
                warn(f'Skipped layer "{i}" on top of `{self._fn}`: not found.')
                continue
            instance.merge(IniParser(i).read())
        return instance

    @staticmethod
    def _output_section(section: IniSection) -> list[str]:
        ret = list(section.comments)
        if section.name is not None:
            decl = f'[{section.name}]'
            ret.append(
                decl if section.inline is None
                else f'{decl} {section.inline}')
        for i in section.entries():
            ret.extend(i.comments)
            pair = f'{i.key}={i.value}'
            ret.append(pair if i.inline is None else f'{pair} {i.inline}')
        return ret

    @classmethod
    def dumps(cls, instance: IniDocument, blank_lines: int = 1) -> str:
        """Serializes `instance`. Sections without entries are left out."""
        chunks: list[list[str]] = []
        header = cls._output_section(instance.header)
        if header:
            chunks.append(header)
        # comments of skipped sections go with whatever comes next.
        carry: list[str] = []
        for i in instance.sections():
            if not len(i):
                carry.extend(orphan_comments(i))
                continue
            chunks.append(carry + cls._output_section(i))
            carry = []
        if carry or instance.trailing_comments:
            chunks.append(carry + instance.trailing_comments)
        sep = '\n' * (blank_lines + 1)
        ret = sep.join('\n'.join(i) for i in chunks)
        return ret + '\n' if ret else ret

    def write(self, instance: IniDocument) -> None:
        """Saves `instance` as UTF-8 without BOM, with the host's newlines."""
        logging.debug(f'Writing {self._fn}')
        with open(self._fn, 'w', encoding='utf-8') as fp:
            fp.write(self.dumps(instance, self._blank_lines))

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__()
