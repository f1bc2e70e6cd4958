import io

import pytest

from oogabooga.log import LogLevel, default_logger, version_number, version_string


@pytest.mark.parametrize(
    "level, prefix",
    [
        (LogLevel.VERBOSE, "[VERBOSE]: "),
        (LogLevel.INFO, "[INFO]:    "),
        (LogLevel.WARNING, "[WARNING]: "),
        (LogLevel.ERROR, "[ERROR]:   "),
    ],
)
def test_default_logger_prefixes(level, prefix):
    stream = io.StringIO()
    default_logger(level, "hello", stream)
    assert stream.getvalue() == prefix + "hello\n"


def test_level_count_writes_nothing():
    stream = io.StringIO()
    default_logger(LogLevel.LEVEL_COUNT, "ignored", stream)
    assert stream.getvalue() == ""


def test_multiple_messages_are_appended_in_order():
    stream = io.StringIO()
    default_logger(LogLevel.INFO, "first", stream)
    default_logger(LogLevel.ERROR, "second", stream)
    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("first")
    assert lines[1].endswith("second")


def test_default_logger_rejects_non_level():
    with pytest.raises(TypeError):
        default_logger("INFO", "x", io.StringIO())


def test_default_logger_writes_to_stdout(capsys):
    default_logger(LogLevel.WARNING, "careful")
    assert capsys.readouterr().out == "[WARNING]: careful\n"


def test_version_string_current():
    assert version_string(0, 1, 8) == "0.01.008"


def test_version_string_round_trip():
    parts = version_string(3, 42, 7).split(".")
    assert [int(p) for p in parts] == [3, 42, 7]
    assert len(parts[1]) == 2 and len(parts[2]) == 3


def test_version_number_current():
    assert version_number(0, 1, 8) == 1008


def test_version_number_ordering():
    assert version_number(0, 1, 8) < version_number(0, 1, 9)
    assert version_number(0, 1, 999) < version_number(0, 2, 0)
    assert version_number(0, 999, 999) < version_number(1, 0, 0)


def test_defaults_match_explicit_current_version():
    assert version_number() == version_number(0, 1, 8)
    assert version_string() == version_string(0, 1, 8)