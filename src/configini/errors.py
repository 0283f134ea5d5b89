# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/09/20 22:41:17
# @Author : Kariko Lin

"""Status codes and exceptions.

Lookup misses inside typed getters are reported as `ConfigRet` values,
everything else is raised as a `ConfigError` subclass.
"""

from enum import Enum


class ConfigRet(int, Enum):
    OK = 0
    FILE = 1  # stream could not be opened
    NO_SECTION = 2
    NO_KEY = 3
    MEMALLOC = 4
    INVALID_PARAM = 5
    INVALID_VALUE = 6  # inconsistent or empty data
    PARSING = 7  # does not fit the INI format

    def describe(self) -> str:
        return _RET_MESSAGES[self]


_RET_MESSAGES = {
    ConfigRet.OK: 'OK',
    ConfigRet.FILE: 'File IO error',
    ConfigRet.NO_SECTION: 'No section',
    ConfigRet.NO_KEY: 'No key',
    ConfigRet.MEMALLOC: 'Memory allocation failed',
    ConfigRet.INVALID_PARAM: 'Invalid parameter',
    ConfigRet.INVALID_VALUE: 'Invalid value',
    ConfigRet.PARSING: 'Parse error',
}


class ConfigError(Exception):
    """Base of all errors raised by `configini`."""
    ret = ConfigRet.INVALID_PARAM


class InvalidArgument(ConfigError, ValueError):
    ret = ConfigRet.INVALID_PARAM


class FileError(ConfigError, OSError):
    ret = ConfigRet.FILE


class NoSuchSection(ConfigError, KeyError):
    ret = ConfigRet.NO_SECTION

    def __init__(self, section: str | None) -> None:
        self.section = section
        super().__init__(
            'default section' if section is None else f'[{section}]')


class NoSuchKey(ConfigError, KeyError):
    ret = ConfigRet.NO_KEY

    def __init__(self, section: str | None, key: str) -> None:
        self.section = section
        self.key = key
        super().__init__(
            f'"{key}" in '
            + ('default section' if section is None else f'[{section}]'))


class AllocationFailure(ConfigError, MemoryError):
    ret = ConfigRet.MEMALLOC


class _LineError(ConfigError, ValueError):
    """Carries where in the stream things went wrong."""

    def __init__(
        self, msg: str, lineno: int | None = None, line: str | None = None
    ) -> None:
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            msg = f'line {lineno}: {msg}'
        if line is not None:
            msg += f'\n\t{line.rstrip()}'
        super().__init__(msg)


class InvalidValue(_LineError):
    ret = ConfigRet.INVALID_VALUE


class ParseError(_LineError):
    ret = ConfigRet.PARSING
