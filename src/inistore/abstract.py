# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 20:22:30

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Reads a file into `T`, or writes `T` back to it."""

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        self._fn = fspath(filename)
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
