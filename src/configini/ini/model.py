# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/09/20 23:31:02
# @Author : Kariko Lin

"""Basically INI structure: ordered sections of ordered key-value pairs.

The nameless (`None`) section holds pairs declared before any `[section]`,
it always exists and always comes first.
"""

from collections.abc import Callable, Mapping, MutableMapping
from typing import Iterator, NamedTuple

from ..errors import InvalidArgument, NoSuchKey, NoSuchSection
from .settings import LINE_BREAKS, WHITESPACE, IniSettings


class KeyValue(NamedTuple):
    key: str
    value: str


def _check_key(key: object) -> str:
    if not isinstance(key, str) or not key:
        raise InvalidArgument(f'key should be a non-empty str, got {key!r}.')
    return key


class IniSection(MutableMapping[str, str]):
    """Key-value pairs of one INI section, in declaration order.

    Re-assigning an existing key keeps its position, as `dict` does.
    Values are cleaned up and new keys are checked by the owning
    document before stored, see `IniDocument.add_or_update_key()`.
    """

    def __init__(
        self, name: str | None, /,
        sanitizer: Callable[[str], str] | None = None,
        key_checker: Callable[[str], str] | None = None
    ) -> None:
        self._name = name
        self._data: dict[str, str] = {}
        self.__sanitize = sanitizer
        self.__check_key = key_checker

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_default(self) -> bool:
        return self._name is None

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        _check_key(key)
        if key not in self._data and self.__check_key is not None:
            self.__check_key(key)
        if not isinstance(value, str):
            raise InvalidArgument(
                f'value of "{key}" should be a str, got {type(value).__name__}.'
                ' Try the typed `set_*()` of `IniConfig`.')
        if self.__sanitize is not None:
            value = self.__sanitize(value)
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return '' if self._name is None else f'[{self._name}]'

    def __repr__(self) -> str:
        return '%s { .cnt = %d }' % (
            str(self) or '<default>', len(self._data))

    def pairs(self) -> Iterator[KeyValue]:
        for k, v in self._data.items():
            yield KeyValue(k, v)

    def find(self, key: str) -> KeyValue | None:
        if key not in self._data:
            return None
        return KeyValue(key, self._data[key])


class IniDocument(MutableMapping[str | None, IniSection]):
    """INI file representation. Sections are keyed by name,
    where `None` stands for the default section:

        ```ini
        key = val  # use self.header (or self[None]) to access this.

        [section]
        key233 = val666
        ```

    Parsing options live in `self.settings`, change them with `set_*()`.
    """

    def __init__(self, settings: IniSettings | None = None) -> None:
        self.__settings = settings if settings is not None else IniSettings()
        self.__sections: dict[str | None, IniSection] = {}
        self.__new_section(None)

    # settings

    @property
    def settings(self) -> IniSettings:
        return self.__settings

    def set_comment_charset(self, chars: str) -> None:
        self.__settings = self.__settings.with_comment_chars(chars)

    def set_separator(self, ch: str) -> None:
        self.__settings = self.__settings.with_separator(ch)

    def set_bool_strings(self, true_str: str, false_str: str) -> None:
        self.__settings = self.__settings.with_bool_strings(
            true_str, false_str)

    # mapping protocol

    @property
    def header(self) -> IniSection:
        """Pairs which belong to no `[section]`."""
        return self.__sections[None]

    def __getitem__(self, name: str | None) -> IniSection:
        if name not in self.__sections:
            raise NoSuchSection(name)
        return self.__sections[name]

    def __setitem__(
        self, name: str | None, value: Mapping[str, str]
    ) -> None:
        """Replace (or create) a whole section with a copy of `value`."""
        # copy first, in case `value` is the section itself.
        pairs = list(value.items())
        sect = self.add_section(name)
        sect.clear()
        for k, v in pairs:
            sect[k] = v

    def __delitem__(self, name: str | None) -> None:
        self.remove_section(name)

    def __contains__(self, name: object) -> bool:
        return name in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str | None]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return '<%s sections=%d keys=%d>' % (
            type(self).__name__,
            len(self),
            sum(len(i) for i in self.__sections.values()))

    def clear(self) -> None:
        """Drop all named sections, keep an emptied default one."""
        for name in [i for i in self.__sections if i is not None]:
            del self.__sections[name]
        self.header.clear()

    # model operations

    def __new_section(self, name: str | None) -> IniSection:
        sect = IniSection(name, self._sanitize_value, self._check_writable_key)
        self.__sections[name] = sect
        return sect

    def _sanitize_value(self, value: str) -> str:
        """Strip the value like a parsed one: leading blanks,
        anything from a line break or comment char on, trailing blanks."""
        value = value.lstrip(WHITESPACE)
        for idx, ch in enumerate(value):
            if ch in LINE_BREAKS or self.__settings.is_comment(ch):
                value = value[:idx]
                break
        return value.rstrip(WHITESPACE)

    def _check_writable_key(self, key: str) -> str:
        """Reject a key that would not be parsed back as itself."""
        cfg = self.__settings
        if (key != key.strip(WHITESPACE) or key.startswith('[')
                or any(ch in LINE_BREAKS or ch == cfg.separator
                       or cfg.is_comment(ch) for ch in key)):
            raise InvalidArgument(f'{key!r} cannot be written as a key.')
        return key

    def _check_writable_name(self, name: str) -> str:
        cfg = self.__settings
        if (name != name.strip(WHITESPACE)
                or any(ch in LINE_BREAKS or ch == ']'
                       or cfg.is_comment(ch) for ch in name)):
            raise InvalidArgument(
                f'{name!r} cannot be written as a section name.')
        return name

    def find_section(self, name: str | None) -> IniSection | None:
        return self.__sections.get(name)

    def has_section(self, name: str | None) -> bool:
        return name in self.__sections

    def find_key(self, section: str | None, key: str) -> KeyValue | None:
        if (sect := self.find_section(section)) is None:
            return None
        return sect.find(key)

    def add_section(self, name: str | None) -> IniSection:
        """Get section `name`, create and append it if not exists."""
        if name is not None and (not isinstance(name, str) or not name):
            raise InvalidArgument(
                f'section name should be a non-empty str, got {name!r}.')
        if (sect := self.__sections.get(name)) is not None:
            return sect
        self._check_writable_name(name)
        return self.__new_section(name)

    def add_or_update_key(
        self, section: str | None, key: str, value: str
    ) -> KeyValue:
        sect = self.add_section(section)
        sect[key] = value
        return KeyValue(key, sect[key])

    def remove_key(self, section: str | None, key: str) -> None:
        _check_key(key)
        sect = self[section]
        if key not in sect:
            raise NoSuchKey(section, key)
        del sect[key]

    def remove_section(self, name: str | None) -> None:
        if name is None:
            raise InvalidArgument('the default section cannot be removed.')
        if name not in self.__sections:
            raise NoSuchSection(name)
        self.__sections.pop(name).clear()

    def section_count(self) -> int:
        """All sections, the default one included."""
        return len(self.__sections)

    def named_section_count(self) -> int:
        return len(self.__sections) - 1

    def key_count(self, section: str | None) -> int:
        return len(self[section])

    def sections(self) -> Iterator[IniSection]:
        return iter(self.__sections.values())
