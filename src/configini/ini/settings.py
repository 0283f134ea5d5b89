# -*- encoding: utf-8 -*-
# @File   : settings.py
# @Time   : 2026/09/20 23:05:48
# @Author : Kariko Lin

from dataclasses import dataclass, replace

from ..errors import InvalidArgument

# ASCII only, `str.isspace()` also matches unicode spaces.
WHITESPACE = ' \t\n\r\v\f'
LINE_BREAKS = '\r\n'


@dataclass(frozen=True, kw_only=True)
class IniSettings:
    """How an INI text gets tokenized and how booleans get written.

    Frozen. `IniDocument` replaces the whole instance in its `set_*()` methods.
    """
    comment_chars: str = '#'
    separator: str = '='
    true_str: str = '1'
    false_str: str = '0'

    def __post_init__(self) -> None:
        if not isinstance(self.comment_chars, str):
            raise InvalidArgument('comment charset should be a str.')
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise InvalidArgument(
                f'separator should be a single char, got {self.separator!r}.')
        if (self.separator in WHITESPACE
                or self.separator == '['
                or self.separator in self.comment_chars):
            raise InvalidArgument(
                f'{self.separator!r} cannot be used as separator.')
        if not self.true_str or not self.false_str:
            raise InvalidArgument('boolean strings should not be empty.')

    def is_comment(self, ch: str) -> bool:
        return ch != '' and ch in self.comment_chars

    def with_comment_chars(self, chars: str) -> 'IniSettings':
        return replace(self, comment_chars=chars)

    def with_separator(self, ch: str) -> 'IniSettings':
        return replace(self, separator=ch)

    def with_bool_strings(
        self, true_str: str, false_str: str
    ) -> 'IniSettings':
        return replace(self, true_str=true_str, false_str=false_str)

    def describe(self) -> str:
        return (
            '\nConfiguration settings: \n'
            f'   Comment characters : {self.comment_chars}\n'
            f'   Key-Value separator: {self.separator}\n'
            f'   True-False strings : {self.true_str}-{self.false_str}\n'
            '\n')
