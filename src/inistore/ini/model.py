# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 21:04:17

"""
In-memory INI structure.

A document is an ordered group of sections; a section is an ordered
group of `str: str` pairs. Pairs found before any `[section]` header
belong to the unnamed section `''`, see `IniClass.header`.
"""

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Iterator
from warnings import warn

DEFAULT_SECTION = ''


class IniSection(MutableMapping[str, str]):
    """... is a dict, just maintaining pairs in insertion order.

    Unlike a plain dict, values are checked to be `str`,
    typed values shall go through `IniStore.set()` instead.
    """

    def __init__(
        self, section_name: str = DEFAULT_SECTION, /,
        pairs: Mapping[str, str] | Iterable[tuple[str, str]] = ()
    ) -> None:
        self._name = section_name
        self.__raw: dict[str, str] = {}
        self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(
                f'[{self._name}] {key}: expected str value, '
                f'got {type(value).__name__}')
        self.__raw[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] %r' % (self._name, self.__raw)

    def to_dict(self) -> dict[str, str]:
        return self.__raw.copy()


class IniClass(MutableMapping[str, IniSection]):
    """... is simply a group of sections,
    representing a whole INI document.

        ```ini
        key = val  ; use self.header to access pairs outside of sections.

        [section]
        key233 = val666
        ```
    """

    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}

    @property
    def header(self) -> IniSection:
        """The unnamed section, holding pairs before the first header."""
        return self.setdefault(DEFAULT_SECTION)

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self, key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return 'IniClass(%r)' % list(self.__raw.values())

    def setdefault(  # type: ignore[override]
        self, section: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        """If `section` not in self, then add it (filled with `default`).
        Returns the section either way."""
        if section not in self.__raw:
            self.__raw[section] = IniSection(section, default or ())
        return self.__raw[section]

    def clear(self) -> None:
        self.__raw.clear()

    def rename(self, old: str, new: str) -> bool:
        """Rename a section, keeping its position.

        Returns:
            `True` if succeed, otherwise `False`.
            May not success if `old` is not found or `new` already exists.
        """
        if old not in self.__raw:
            return False
        if new in self.__raw:
            warn(f'Section [{new}] already exists, [{old}] is not renamed.')
            return False
        self.__raw = {
            (new if name == old else name):
                (IniSection(new, sect) if name == old else sect)
            for name, sect in self.__raw.items()
        }
        return True

    def update(  # type: ignore[override]
        self, another: 'IniClass | Mapping[str, Mapping[str, str]]'
    ) -> None:
        """To merge `another` into self. Later pairs win."""
        for decl, data in another.items():
            self.setdefault(decl).update(data)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: sect.to_dict() for name, sect in self.__raw.items()}

    def iter_sections(self) -> Iterator[IniSection]:
        """Sections in serialization order: the header comes first."""
        if DEFAULT_SECTION in self.__raw:
            yield self.__raw[DEFAULT_SECTION]
        for name, sect in self.__raw.items():
            if name != DEFAULT_SECTION:
                yield sect
