"""Test cases for writing a store back to INI text."""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from configini import FileError, IniConfig, IniParser
from tests.conftest import sections_of


def test_dump_layout(config: IniConfig):
    """Given pairs in the default section and in one named section
    When dumped
    Then the default section has no header and every section ends with a blank line
    """
    config.set_string(None, "k", "v")
    config.set_string("s", "a", "1")
    config.set_string("s", "b", "two words")

    assert IniParser.dumps(config) == "k=v\n\n[s]\na=1\nb=two words\n\n"


def test_dump_empty_store(config: IniConfig):
    assert IniParser.dumps(config) == "\n"


def test_dump_uses_configured_separator(config: IniConfig):
    config.set_separator(":")
    config.set_string("s", "a", "1")

    assert IniParser.dumps(config) == "\n[s]\na:1\n\n"


def test_round_trip(config: IniConfig):
    """Given a store built through the API
    When it is dumped and parsed again
    Then sections and pairs match in order and content
    """
    config.set_string(None, "title", "Root level")
    config.set_string("owner", "name", "Ada Lovelace")
    config.set_string("owner", "org", "Analytical Engines")
    config.set_int("db", "port", 5432)
    config.set_bool("db", "ssl", True)
    config.set_double("db", "timeout", 2.5)
    config.set_string("owner", "name", "Augusta Ada King")
    config.add_section("empty")

    again = IniParser.loads(IniParser.dumps(config))

    assert sections_of(again) == sections_of(config)


def test_round_trip_of_unusual_names(config: IniConfig):
    config.set_string("my section", "my key", "v")
    config.set_string("a[b", "k[0]", "w")
    config.set_string(None, "x]", "y")

    again = IniParser.loads(IniParser.dumps(config))

    assert sections_of(again) == sections_of(config)


def test_round_trip_with_custom_separator(config: IniConfig):
    config.set_separator(":")
    config.set_string("paths", "url", "http://example.org/a=b")

    again = IniConfig()
    again.set_separator(":")
    IniParser.loads(IniParser.dumps(config), again)

    assert sections_of(again) == sections_of(config)


def test_writebytes(config: IniConfig):
    config.set_string("s", "name", "Zoë")
    buf = BytesIO()

    IniParser.writebytes(config, buf)

    assert buf.getvalue() == "\n[s]\nname=Zoë\n\n".encode("utf-8")
    assert sections_of(IniParser.readbytes(buf.getvalue())) == sections_of(config)


def test_write_and_read_file(temp_dir: Path, config: IniConfig):
    config.set_string("owner", "name", "Ada Lovelace")
    config.set_uint("db", "port", 5432)
    path = temp_dir / "out.ini"

    IniParser(path).write(config)
    loaded = IniParser(path).read()

    assert path.read_bytes().startswith(b"\n[owner]\nname=Ada Lovelace\n")
    assert sections_of(loaded) == sections_of(config)


def test_write_into_missing_directory(temp_dir: Path, config: IniConfig):
    with pytest.raises(FileError):
        IniParser(temp_dir / "no" / "such" / "dir.ini").write(config)


def test_write_settings(config: IniConfig):
    config.set_bool_strings("true", "false")
    out = StringIO()

    IniParser.write_settings(config, out)

    assert "Comment characters : #" in out.getvalue()
    assert "Key-Value separator: =" in out.getvalue()
    assert "True-False strings : true-false" in out.getvalue()
