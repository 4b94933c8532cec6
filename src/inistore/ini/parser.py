# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 21:40:02

"""Plain INI reading and writing.

The syntax understood here is the simple one:

    ```ini
    key = value         # pairs before any header go to the '' section
    [Section]
    key2=value2   # trailing comment, stripped with surrounding spaces
    ```

- only ASCII space and tab are trimmed around names and values;
- `#` starts a comment anywhere, there is no quoting nor escaping;
- a value always lasts to the end of its line.
"""

import logging
from io import StringIO
from typing import Iterable, TextIO

from chardet import detect as guess_codec

from ..abstract import FileHandler
from .model import DEFAULT_SECTION, IniClass

__all__ = ['IniFormatError', 'IniParser']

logger = logging.getLogger(__name__)

SPACES = ' \t'
COMMENT = '#'
LINE_ENDS = '\r\n'


class IniFormatError(ValueError):
    """To record malformed lines when reading INIs."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.line = line


class IniParser(FileHandler[IniClass]):
    def __init__(
        self, filename, encoding: str | None = None, *,
        ignore_errors: bool = False
    ) -> None:
        super().__init__(filename, encoding)
        self._ignore_errors = ignore_errors

    @staticmethod
    def _tokenize(raw: str) -> str:
        # a CR left over by CRLF files shall not stick to the last field.
        ln = raw.rstrip(LINE_ENDS)
        if (pos := ln.find(COMMENT)) >= 0:
            ln = ln[:pos]
        return ln.strip(SPACES)

    @staticmethod
    def readstream(
        buf: Iterable[str],
        ins: IniClass | None = None,
        ignore_errors: bool = False
    ) -> IniClass:
        """Read a decoded text stream, adding to `ins` if given.

        Raises `IniFormatError` on the first malformed line,
        unless `ignore_errors` is set, then the line is just skipped.
        Pairs read before the error are kept in `ins`.
        """
        if ins is None:
            ins = IniClass()
        this_sect = DEFAULT_SECTION
        for lineno, raw in enumerate(buf, 1):
            if not (ln := IniParser._tokenize(raw)):
                continue

            if ln[0] == '[':
                if (end := ln.find(']')) < 0:
                    msg = f'Unclosed section header at line {lineno}!'
                else:
                    this_sect = ln[1:end].strip(SPACES)
                    ins.setdefault(this_sect)
                    continue
            elif (eqpos := ln.find('=')) >= 0:
                key = ln[:eqpos].rstrip(SPACES)
                ins.setdefault(this_sect)[key] = ln[eqpos + 1:].lstrip(SPACES)
                continue
            else:
                msg = f'Wrong ini file format at line {lineno}!'

            if not ignore_errors:
                raise IniFormatError(msg, lineno)
            logger.debug('%s Skipped: %r', msg, ln)
        return ins

    @staticmethod
    def writestream(ins: IniClass, buf: TextIO) -> None:
        """Write `ins` to a text stream, formatted as an INI file."""
        for sect in ins.iter_sections():
            if sect.name == DEFAULT_SECTION:
                if not sect:
                    continue
            else:
                buf.write(f'[{sect.name}]\n')
            for key, val in sect.items():
                buf.write(f'{key} = {val}\n')
            buf.write('\n')

    @staticmethod
    def dumps(ins: IniClass) -> str:
        buf = StringIO()
        IniParser.writestream(ins, buf)
        return buf.getvalue()

    @staticmethod
    def loads(text: str, ignore_errors: bool = False) -> IniClass:
        return IniParser.readstream(
            StringIO(text, newline=None), ignore_errors=ignore_errors)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        try:
            buf = raw.decode('utf-8-sig')
        except UnicodeDecodeError:
            codec = guess_codec(raw)
            if codec['encoding'] is None or codec['confidence'] < 0.8:
                codec = {'encoding': 'gbk'}
            logger.debug('%s is not utf-8, decoding as %s.',
                         filename, codec['encoding'])
            # fallbacks
            try:
                buf = raw.decode(codec['encoding'])
            except (UnicodeDecodeError, LookupError):
                buf = raw.decode('gbk', errors='replace')
        # universal newlines, like `open()` in text mode.
        return StringIO(buf, newline=None)

    def readinto(self, ins: IniClass) -> IniClass:
        """Read the file of this parser into `ins`, keeping its content.

        May raise `OSError` if the file is not readable.
        """
        if self._codec is None:
            return self.readstream(
                self._decode_file(self._fn), ins, self._ignore_errors)
        try:
            # decode all first, so a bad byte adds nothing to `ins`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                buf = StringIO(fp.read())
        except UnicodeDecodeError:
            logger.warning('%s is not %s, guessing its encoding.',
                           self._fn, self._codec)
            buf = self._decode_file(self._fn)
        return self.readstream(buf, ins, self._ignore_errors)

    def read(self) -> IniClass:
        return self.readinto(IniClass())

    def write(self, instance: IniClass) -> None:
        """May raise `UnicodeEncodeError` before the file is truncated."""
        raw = self.dumps(instance).encode(self._codec or 'utf-8')
        with open(self._fn, 'wb') as fp:
            fp.write(raw)

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f'({self._codec})'
