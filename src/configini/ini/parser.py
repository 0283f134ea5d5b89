# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/09/21 21:47:55
# @Author : Kariko Lin

"""Line based INI reader and writer.

Each line is one of: blank / comment, `[section]`, or `key = value`.
Tokens are trimmed one by one (section name, key, value), so comments
may trail any of them. There is no escaping and no multi-line value.

Anything malformed aborts the whole stream, see `IniParser.readstream()`.
"""

import codecs
import logging
from collections.abc import Iterable
from io import StringIO
from os import PathLike
from typing import BinaryIO, TextIO

import chardet

from ..abstract import FileHandler
from ..errors import (
    AllocationFailure,
    FileError,
    InvalidValue,
    ParseError,
)
from .config import IniConfig
from .model import IniDocument, IniSection
from .settings import LINE_BREAKS, WHITESPACE, IniSettings

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = 'utf-8-sig'
FALLBACK_ENCODING = 'latin-1'  # never fails.
MIN_CONFIDENCE = 0.8


def _scan(text: str, cfg: IniSettings, stop: str = '') -> int:
    """Index of the first line break, comment char or `stop` char."""
    for idx, ch in enumerate(text):
        if ch in LINE_BREAKS or ch == stop or cfg.is_comment(ch):
            return idx
    return len(text)


def parse_section_name(line: str, cfg: IniSettings, lineno: int = 0) -> str:
    """`[ name ]  # comment` -> `name`."""
    p = line.lstrip(WHITESPACE)
    if not p.startswith('['):
        raise ParseError('not a section header.', lineno, line)
    p = p[1:].lstrip(WHITESPACE)
    end = _scan(p, cfg, ']')
    if end == len(p) or p[end] != ']':
        raise ParseError('section header is not closed.', lineno, line)
    name = p[:end].rstrip(WHITESPACE)
    if not name:
        raise ParseError('section has no name.', lineno, line)
    rest = p[end + 1:].lstrip(WHITESPACE)
    if rest and not cfg.is_comment(rest[0]):
        raise ParseError(
            'unrecognized trailing data after section header.', lineno, line)
    return name


def parse_key_value(
    line: str, cfg: IniSettings, lineno: int = 0
) -> tuple[str, str]:
    """`key = value  # comment` -> `('key', 'value')`."""
    p = line.lstrip(WHITESPACE)
    end = _scan(p, cfg, cfg.separator)
    if end == len(p) or p[end] != cfg.separator:
        raise ParseError(
            f'missing "{cfg.separator}" between key and value.', lineno, line)
    key = p[:end].rstrip(WHITESPACE)
    if not key:
        raise ParseError('no key name.', lineno, line)
    v = p[end + 1:].lstrip(WHITESPACE)
    val = v[:_scan(v, cfg)].rstrip(WHITESPACE)
    if not val:
        raise InvalidValue(f'"{key}" has no value.', lineno, line)
    return key, val


class IniParser(FileHandler[IniConfig]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: Iterable[str], ins: IniConfig | None = None
    ) -> IniConfig:
        """Read decoded lines (a text stream, or just a list of `str`).

        If `ins` is None, a new `IniConfig` is created and only returned
        on success. Otherwise lines are merged into `ins`, which keeps
        whatever got parsed before an error.
        """
        fresh = ins is None
        if ins is None:
            ins = IniConfig()
        cfg = ins.settings
        this_sect: str | None = None
        try:
            for lineno, i in enumerate(buf, 1):
                p = i.lstrip(WHITESPACE)
                if not p or cfg.is_comment(p[0]):
                    continue
                if p[0] == '[':
                    this_sect = ins.add_section(
                        parse_section_name(i, cfg, lineno)).name
                    logger.debug('line %d: enter [%s]', lineno, this_sect)
                else:
                    ins.add_or_update_key(
                        this_sect, *parse_key_value(i, cfg, lineno))
        except (ParseError, InvalidValue) as e:
            if fresh:
                logger.debug(
                    'parsing aborted at line %s, partial document dropped.',
                    e.lineno)
            raise
        except MemoryError as e:
            raise AllocationFailure('out of memory while parsing.') from e
        return ins

    @staticmethod
    def loads(text: str, ins: IniConfig | None = None) -> IniConfig:
        return IniParser.readstream(StringIO(text), ins)

    @staticmethod
    def _decode_bytes(raw: bytes, encoding: str | None = None) -> StringIO:
        if encoding is None or codecs.lookup(encoding).name == 'utf-8':
            encoding = DEFAULT_ENCODING
        try:
            return StringIO(raw.decode(encoding))
        except UnicodeDecodeError:
            logger.debug('not %s encoded, guessing with chardet.', encoding)

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < MIN_CONFIDENCE):
            logger.warning(
                'unable to guess the encoding, fallback to %s.',
                FALLBACK_ENCODING)
            return StringIO(raw.decode(FALLBACK_ENCODING))

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode(FALLBACK_ENCODING)
        return StringIO(buf)

    @staticmethod
    def readbytes(
        raw: bytes | bytearray | BinaryIO,
        ins: IniConfig | None = None,
        encoding: str | None = None
    ) -> IniConfig:
        """Read a byte string, or a binary stream opened by the caller."""
        if not isinstance(raw, (bytes, bytearray)):
            raw = raw.read()
        return IniParser.readstream(
            IniParser._decode_bytes(bytes(raw), encoding), ins)

    def read(self, ins: IniConfig | None = None) -> IniConfig:
        """Read the file this `IniParser` is bound to.

        The file is decoded by `readbytes()`, so a UTF-8 BOM is dropped
        and an undecodable file falls back to `chardet` guessing.
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise FileError(f'unable to read "{self._fn}": {e}') from e
        return self.readbytes(raw, ins, self._codec)

    @staticmethod
    def _output_section(sect: IniSection, delimiter: str = '=') -> str:
        ret = '' if sect.is_default else f'{sect}\n'
        for k, v in sect.items():
            ret += f'{k}{delimiter}{v}\n'
        return ret + '\n'

    @staticmethod
    def writestream(instance: IniDocument, fp: TextIO) -> None:
        """Default section goes first without a header,
        each section is followed by a blank line."""
        delimiter = instance.settings.separator
        for i in instance.sections():
            fp.write(IniParser._output_section(i, delimiter))

    @staticmethod
    def dumps(instance: IniDocument) -> str:
        buf = StringIO()
        IniParser.writestream(instance, buf)
        return buf.getvalue()

    @staticmethod
    def writebytes(
        instance: IniDocument, fp: BinaryIO, encoding: str = 'utf-8'
    ) -> None:
        fp.write(IniParser.dumps(instance).encode(encoding))

    @staticmethod
    def write_settings(instance: IniDocument, fp: TextIO) -> None:
        fp.write(instance.settings.describe())

    def write(self, instance: IniDocument) -> None:
        """Save to the bound file, overwriting it."""
        try:
            with open(
                self._fn, 'w', encoding=self._codec or 'utf-8', newline=''
            ) as fp:
                self.writestream(instance, fp)
        except OSError as e:
            raise FileError(f'unable to write "{self._fn}": {e}') from e

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
