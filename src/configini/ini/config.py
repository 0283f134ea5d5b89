# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2026/09/21 20:12:36
# @Author : Kariko Lin

"""Typed access on top of `IniDocument`.

Every `read_*()` returns a `ReadResult`, whose `status` tells
why the default value got returned (if so). `get_*()` just drops it.
"""

import math
import re
import struct
from typing import Any, NamedTuple

from ..errors import ConfigRet, InvalidArgument
from .model import IniDocument
from .settings import WHITESPACE

INT_MIN, INT_MAX = -(1 << 31), (1 << 31) - 1
UINT_MAX = (1 << 32) - 1

_INT = re.compile(r'[+-]?[0-9]+')
_UINT = re.compile(r'\+?[0-9]+')
_FLOAT = re.compile(
    r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|[+-]?(?:inf|infinity|nan)', re.I)

BOOL_TRUE = ('true', 'yes', '1')
BOOL_FALSE = ('false', 'no', '0')


class ReadResult(NamedTuple):
    value: Any
    status: ConfigRet

    @property
    def ok(self) -> bool:
        return self.status is ConfigRet.OK


def _to_single(value: float) -> float:
    """Round to IEEE single precision, `OverflowError` if out of range."""
    return struct.unpack('<f', struct.pack('<f', value))[0]


def _underflows(raw: str, value: float) -> bool:
    """A non-zero mantissa which ends up as zero."""
    mantissa = raw.lower().partition('e')[0]
    return value == 0.0 and any(ch in '123456789' for ch in mantissa)


def _parse_int(raw: str, lo: int, hi: int, pattern: re.Pattern) -> int | None:
    raw = raw.lstrip(WHITESPACE)
    if not pattern.fullmatch(raw):
        return None
    ret = int(raw)
    return ret if lo <= ret <= hi else None


def _parse_double(raw: str) -> float | None:
    raw = raw.lstrip(WHITESPACE)
    if not _FLOAT.fullmatch(raw):
        return None
    ret = float(raw)
    # out of double range: "1e400" gives inf and "1e-400" gives 0.
    if ((math.isinf(ret) and 'inf' not in raw.lower())
            or _underflows(raw, ret)):
        return None
    return ret


class IniConfig(IniDocument):
    """`IniDocument` with conversions between stored strings and scalars.

    Section `None` always means the default section.
    """

    def _lookup(
        self, section: str | None, key: str
    ) -> tuple[str | None, ConfigRet]:
        if (sect := self.find_section(section)) is None:
            return None, ConfigRet.NO_SECTION
        if key not in sect:
            return None, ConfigRet.NO_KEY
        return sect[key], ConfigRet.OK

    # readers

    def read_string(
        self, section: str | None, key: str,
        default: str = '', size: int | None = None
    ) -> ReadResult:
        """Read the raw value.

        With `size` given the result is cut to `size - 1` chars,
        just like a NUL-terminated buffer would be, and still reported OK.
        """
        if size is not None and (not isinstance(size, int) or size < 1):
            raise InvalidArgument(f'size should be positive, got {size!r}.')
        raw, ret = self._lookup(section, key)
        value = default if raw is None else raw
        if size is not None:
            value = value[:size - 1]
        return ReadResult(value, ret)

    def read_int(
        self, section: str | None, key: str, default: int = 0
    ) -> ReadResult:
        raw, ret = self._lookup(section, key)
        if raw is None:
            return ReadResult(default, ret)
        if (value := _parse_int(raw, INT_MIN, INT_MAX, _INT)) is None:
            return ReadResult(default, ConfigRet.INVALID_VALUE)
        return ReadResult(value, ConfigRet.OK)

    def read_uint(
        self, section: str | None, key: str, default: int = 0
    ) -> ReadResult:
        raw, ret = self._lookup(section, key)
        if raw is None:
            return ReadResult(default, ret)
        if (value := _parse_int(raw, 0, UINT_MAX, _UINT)) is None:
            return ReadResult(default, ConfigRet.INVALID_VALUE)
        return ReadResult(value, ConfigRet.OK)

    def read_float(
        self, section: str | None, key: str, default: float = 0.0
    ) -> ReadResult:
        """Single precision read, the value is rounded accordingly."""
        raw, ret = self._lookup(section, key)
        if raw is None:
            return ReadResult(default, ret)
        if (value := _parse_double(raw)) is None:
            return ReadResult(default, ConfigRet.INVALID_VALUE)
        try:
            single = _to_single(value)
        except OverflowError:
            return ReadResult(default, ConfigRet.INVALID_VALUE)
        if single == 0.0 and value != 0.0:
            return ReadResult(default, ConfigRet.INVALID_VALUE)
        return ReadResult(single, ConfigRet.OK)

    def read_double(
        self, section: str | None, key: str, default: float = 0.0
    ) -> ReadResult:
        raw, ret = self._lookup(section, key)
        if raw is None:
            return ReadResult(default, ret)
        if (value := _parse_double(raw)) is None:
            return ReadResult(default, ConfigRet.INVALID_VALUE)
        return ReadResult(value, ConfigRet.OK)

    def read_bool(
        self, section: str | None, key: str, default: bool = False
    ) -> ReadResult:
        """Case-insensitive. Accepts `true/yes/1`, `false/no/0`
        and the configured `settings.true_str` / `settings.false_str`."""
        raw, ret = self._lookup(section, key)
        if raw is None:
            return ReadResult(default, ret)
        raw = raw.lower()
        if raw in BOOL_TRUE or raw == self.settings.true_str.lower():
            return ReadResult(True, ConfigRet.OK)
        if raw in BOOL_FALSE or raw == self.settings.false_str.lower():
            return ReadResult(False, ConfigRet.OK)
        return ReadResult(default, ConfigRet.INVALID_VALUE)

    # shorthands

    def get_string(
        self, section: str | None, key: str,
        default: str = '', size: int | None = None
    ) -> str:
        return self.read_string(section, key, default, size).value

    def get_int(self, section: str | None, key: str, default: int = 0) -> int:
        return self.read_int(section, key, default).value

    def get_uint(self, section: str | None, key: str, default: int = 0) -> int:
        return self.read_uint(section, key, default).value

    def get_float(
        self, section: str | None, key: str, default: float = 0.0
    ) -> float:
        return self.read_float(section, key, default).value

    def get_double(
        self, section: str | None, key: str, default: float = 0.0
    ) -> float:
        return self.read_double(section, key, default).value

    def get_bool(
        self, section: str | None, key: str, default: bool = False
    ) -> bool:
        return self.read_bool(section, key, default).value

    # writers

    def set_string(self, section: str | None, key: str, value: str) -> None:
        self.add_or_update_key(section, key, value)

    def set_int(self, section: str | None, key: str, value: int) -> None:
        if not isinstance(value, int) or not INT_MIN <= value <= INT_MAX:
            raise InvalidArgument(f'{value!r} is not a 32-bit int.')
        self.add_or_update_key(section, key, '%d' % value)

    def set_uint(self, section: str | None, key: str, value: int) -> None:
        if not isinstance(value, int) or not 0 <= value <= UINT_MAX:
            raise InvalidArgument(f'{value!r} is not a 32-bit unsigned int.')
        self.add_or_update_key(section, key, '%u' % value)

    def set_float(self, section: str | None, key: str, value: float) -> None:
        try:
            value = _to_single(value)
        except (OverflowError, struct.error) as e:
            raise InvalidArgument(f'{value!r} is not a float.') from e
        self.add_or_update_key(section, key, '%f' % value)

    def set_double(self, section: str | None, key: str, value: float) -> None:
        try:
            text = '%f' % value
        except TypeError as e:
            raise InvalidArgument(f'{value!r} is not a double.') from e
        self.add_or_update_key(section, key, text)

    def set_bool(self, section: str | None, key: str, value: bool) -> None:
        self.add_or_update_key(
            section, key,
            self.settings.true_str if value else self.settings.false_str)
