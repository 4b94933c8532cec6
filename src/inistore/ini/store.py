# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2026/10/13 01:30:51

"""INI document bound to a file.

    ```python
    with IniStore('settings.ini', autosync=True) as ini:
        width = ini.get('Window', 'width', 800)
        ini.set('Window', 'maximized', True)
    # settings.ini is written here.
    ```

Note that skipping `close()` (or the `with` block) relies on the
garbage collector to sync, and a failure there can only be logged.
"""

import logging
from os import PathLike, fspath
from typing import Any, Iterable, TextIO, TypeVar

from .codec import ConversionError, ValueCodec, codec_for, parse, render
from .model import IniClass
from .parser import IniParser

__all__ = ['IniFileError', 'IniStore']

logger = logging.getLogger(__name__)

V = TypeVar('V')


class IniFileError(OSError):
    """The linked INI file can't be opened as required."""

    def __init__(self, message: str, path: str = '') -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class IniStore:
    """Sections of `key = value` pairs, optionally linked to a file.

    A store is *linked* once `open()` is called (or a filename is given
    to the constructor). When auto-sync is enabled, the content is written
    back to the linked file on `close()`.
    """

    def __init__(
        self,
        filename: str | PathLike[str] | None = None,
        autosync: bool = False, *,
        ignore_errors: bool = False,
        encoding: str | None = None
    ) -> None:
        self.data = IniClass()
        self._fn = ''
        self._autosync = False
        self._encoding = encoding
        if filename is not None:
            self.open(filename, autosync, ignore_errors)

    # --- link state ---

    @property
    def filename(self) -> str:
        """The name of the linked file, `''` if not linked.

        Only `open()` and `set_filename()` link a file,
        reading a stream with `read()` doesn't.
        """
        return self._fn

    def set_filename(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

    @property
    def autosync_enabled(self) -> bool:
        """If enabled, the linked file is synced before being closed."""
        return self._autosync

    def enable_autosync(self, enable: bool = True) -> None:
        self._autosync = enable

    @property
    def encoding(self) -> str | None:
        return self._encoding

    # --- accessors ---

    def get_str(self, section: str, key: str, default: str) -> str:
        """Returns the value if it exists.
        If not, inserts `default` and returns it."""
        pairs = self.data.setdefault(section)
        if key not in pairs:
            pairs[key] = default
        return pairs[key]

    def set_str(self, section: str, key: str, value: str) -> None:
        self.data.setdefault(section)[key] = value

    def get(
        self, section: str, key: str, default: V,
        codec: ValueCodec | None = None, *,
        strict: bool = False
    ) -> V:
        """Typed `get_str()`, converting with the codec of `type(default)`.

        A value that doesn't parse degrades to the codec's zero value
        (`0` for `int`, etc), unless `strict` is set,
        then `ConversionError` is raised.
        """
        codec = codec or codec_for(type(default))
        if not self.exists(section, key):
            self.set_str(section, key, render(default, codec))
            return default

        text = self.data[section][key]
        try:
            return parse(text, codec)
        except ConversionError:
            if strict:
                raise
            logger.warning('[%s] %s = %r is not a valid %s, using %r.',
                           section, key, text, codec.type.__name__,
                           codec.zero)
            return codec.zero

    def set(
        self, section: str, key: str, value: Any,
        codec: ValueCodec | None = None
    ) -> None:
        """Render `value` as text, then `set_str()` it.

        Raises `ConversionError` if the value has no text form.
        """
        self.set_str(section, key, render(value, codec))

    def exists(self, section: str, key: str) -> bool:
        return section in self.data and key in self.data[section]

    def remove(self, section: str, key: str | None = None) -> bool:
        """Remove a pair, or the whole section if `key` is None.
        Returns whether anything was removed."""
        if section not in self.data:
            return False
        if key is None:
            del self.data[section]
            return True
        if key not in self.data[section]:
            return False
        del self.data[section][key]
        return True

    # --- streams ---

    def read_more(self, buf: Iterable[str], ignore_errors: bool = False):
        """Read an INI stream, adding to the current content.

        A malformed line raises `IniFormatError`, unless `ignore_errors`
        is enabled, then that line is skipped.
        Reading an opened file doesn't link it.
        """
        IniParser.readstream(buf, self.data, ignore_errors)

    def read(self, buf: Iterable[str], ignore_errors: bool = False):
        """Clear the content and `read_more()` from `buf`."""
        self.data.clear()
        self.read_more(buf, ignore_errors)

    def write(self, buf: TextIO) -> None:
        IniParser.writestream(self.data, buf)

    def read_more_files(self, *filenames: str | PathLike[str],
                        ignore_errors: bool = False) -> None:
        """Merge several INI files into the content, later ones win.
        Unreadable files are skipped."""
        for fn in filenames:
            parser = IniParser(fn, self._encoding,
                               ignore_errors=ignore_errors)
            try:
                parser.readinto(self.data)
            except OSError as e:
                logger.warning('INI file skipped: %s', e)

    # --- file binding ---

    def open(
        self, filename: str | PathLike[str],
        autosync: bool, ignore_errors: bool = False
    ) -> None:
        """Read the file and link it to this store.

        A missing or unreadable file is not an error,
        the store just keeps (or starts with) its content.
        """
        self._fn = fspath(filename)
        self._autosync = autosync

        parser = IniParser(self._fn, self._encoding,
                           ignore_errors=ignore_errors)
        try:
            content = parser.read()
        except OSError as e:
            logger.debug('Not reading %s: %s', self._fn, e)
            return
        self.data.clear()
        self.data.update(content)

    def sync(self) -> None:
        """Write the content to the linked file.

        Raises `IniFileError` if no file is linked, it can't be opened,
        or the content doesn't fit its encoding. The file is left untouched
        in the last case.
        """
        if not self._fn:
            raise IniFileError(
                'No linked file specified to be synced to this IniStore!')
        try:
            IniParser(self._fn, self._encoding).write(self.data)
        except UnicodeEncodeError as e:
            raise IniFileError(
                f"Can't encode ini file \"{self._fn}\" as {e.encoding}!",
                self._fn) from e
        except OSError as e:
            raise IniFileError(
                f"Can't open ini file \"{self._fn}\"!", self._fn) from e
        logger.debug('Synced %s.', self._fn)

    def close(self) -> None:
        """Reset the store, syncing the linked file first if auto-sync
        is enabled. If that sync fails, nothing is reset."""
        if self._fn and self._autosync:
            self.sync()
        self.data.clear()
        self._fn = ''
        self._autosync = False

    def __enter__(self) -> 'IniStore':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __del__(self) -> None:
        # closing an unlinked store is a no-op.
        try:
            self.close()
        except IniFileError as e:
            logger.error('Unsaved INI content lost: %s', e)

    def __contains__(self, section: object) -> bool:
        return section in self.data

    def __str__(self) -> str:
        return IniParser.dumps(self.data)

    def __repr__(self) -> str:
        return '<IniStore %r sections=%d autosync=%s>' % (
            self._fn, len(self.data), self._autosync)
