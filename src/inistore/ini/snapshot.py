# -*- encoding: utf-8 -*-
# @File   : snapshot.py
# @Time   : 2026/10/13 16:48:20

"""Dump an INI document as JSON or YAML, and load it back.

Both share the same shape, the default section keyed by `""`:

    ```json
    {"": {"key": "val"}, "Section": {"key233": "val666"}}
    ```
"""

import json
from typing import Any

import yaml

from ..abstract import FileHandler
from .model import IniClass
from .parser import IniFormatError

__all__ = ['IniJsonParser', 'IniYamlParser']


# should keep this base class for better type hinting.
class IniSnapshotParser(FileHandler[IniClass]):
    def __init__(self, filename, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    def _to_doc(self, src: Any) -> IniClass:
        if not isinstance(src, dict):
            raise IniFormatError(
                f'{self._fn}: expected a mapping of sections, '
                f'got {type(src).__name__}.', 0)
        ret = IniClass()
        for sect, pairs in src.items():
            if not isinstance(pairs, dict):
                raise IniFormatError(
                    f'{self._fn}: section "{sect}" is not a mapping.', 0)
            # scalars like `1` or `true` come back as python types.
            ret[str(sect)] = {
                str(k): '' if v is None else str(v) for k, v in pairs.items()
            }
        return ret


class IniJsonParser(IniSnapshotParser):
    def read(self) -> IniClass:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self._to_doc(json.load(fp))

    def write(self, instance: IniClass, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(instance.to_dict(), fp, ensure_ascii=False,
                      indent=indent)


class IniYamlParser(IniSnapshotParser):
    def read(self) -> IniClass:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = yaml.safe_load(fp)
        # an empty file loads as None.
        return self._to_doc({} if src is None else src)

    def write(self, instance: IniClass) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            # values are all str, so '1' stays quoted and won't turn int.
            yaml.safe_dump(instance.to_dict(), fp, allow_unicode=True,
                           sort_keys=False)
