# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/09/20 22:28:05
# @Author : Kariko Lin

"""INI-style configuration: ordered sections of key-value pairs,
typed accessors, and a round-trip reader/writer."""

from .errors import (
    ConfigRet,
    ConfigError,
    InvalidArgument,
    FileError,
    NoSuchSection,
    NoSuchKey,
    AllocationFailure,
    InvalidValue,
    ParseError,
)
from .ini import (
    IniSettings, KeyValue, IniSection, IniDocument,
    IniConfig, ReadResult, IniParser
)

__all__ = [
    'ConfigRet', 'ConfigError', 'InvalidArgument', 'FileError',
    'NoSuchSection', 'NoSuchKey', 'AllocationFailure',
    'InvalidValue', 'ParseError',
    'IniSettings', 'KeyValue', 'IniSection', 'IniDocument',
    'IniConfig', 'ReadResult', 'IniParser',
]

__version__ = '0.1.0'
