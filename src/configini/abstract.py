# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/09/20 22:30:11
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar("T")


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Something bound to one file on disk, able to load `T` from it
    and save `T` back."""

    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

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
