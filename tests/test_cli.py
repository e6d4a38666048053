from datetime import datetime

import pytest
import pytz

from closed_intervals import InvalidArgument
from closed_intervals.__main__ import format_bound, main, parse_value


TABLE = """
[General]
unique = false

[[Point]]
at = 1
data = "a"

[[Point]]
at = 2
data = "b"

[[Point]]
at = 2
data = "c"

[[Point]]
at = 3
data = "d"
"""


@pytest.fixture
def table_path(tmp_path):
    path = tmp_path / "table.toml"
    path.write_text(TABLE)
    return path


def test_lookup(table_path, capsys):
    assert main(["-c", str(table_path), "2.5", "0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "2.5 -> (2 [c], 3 [d])",
        "0 -> (-inf, 1 [a])",
    ]


def test_lookup_all(table_path, capsys):
    assert main(["-c", str(table_path), "--all", "2"]) == 0
    assert capsys.readouterr().out.strip() == "2 -> (1 [a], 2 [b]) (2 [b], 2 [c]) (2 [c], 3 [d])"


def test_ambiguous_value_needs_all(table_path, capsys):
    assert main(["-c", str(table_path), "2"]) == 1
    assert "get_all_intervals" in capsys.readouterr().err


def test_missing_table(tmp_path, capsys):
    assert main(["-c", str(tmp_path / "missing.toml"), "1"]) == 1
    assert capsys.readouterr().err.startswith("Error: Table file not found")


def test_unreadable_value(table_path, capsys):
    assert main(["-c", str(table_path), "tomorrow"]) == 1
    assert "tomorrow" in capsys.readouterr().err


def test_debug_flag(table_path, capsys):
    main(["-c", str(table_path), "--debug", "1.5"])
    captured = capsys.readouterr()
    assert "DEBUG:" in captured.err
    assert captured.out.strip() == "1.5 -> (1 [a], 2 [b])"


def test_parse_value():
    assert parse_value("3") == 3
    assert parse_value("2.5") == 2.5
    assert parse_value("2024-01-01T10:00:00+00:00") == datetime(2024, 1, 1, 10, tzinfo=pytz.UTC)
    with pytest.raises(InvalidArgument):
        parse_value("soon")


def test_format_bound_plain_values():
    assert format_bound(4) == "4"
    assert format_bound(datetime(2024, 1, 1, 10, tzinfo=pytz.UTC)) == "2024-01-01T10:00:00+00:00"


DATETIME_TABLE = """
[[Point]]
at = 2024-01-01T08:00:00Z

[[Point]]
at = 2024-01-01T17:00:00Z
"""


def test_number_in_datetime_table(tmp_path, capsys):
    path = tmp_path / "hours.toml"
    path.write_text(DATETIME_TABLE)
    assert main(["-c", str(path), "5"]) == 1
    assert capsys.readouterr().err.startswith("Error: Cannot look up 5 in a table of datetimes")


def test_datetime_in_number_table(table_path, capsys):
    assert main(["-c", str(table_path), "2024-01-01T10:00:00+00:00"]) == 1
    assert "table of numbers" in capsys.readouterr().err


def test_mixed_table_reports_error(tmp_path, capsys):
    path = tmp_path / "mixed.toml"
    path.write_text("[[Point]]\nat = 1\n\n[[Point]]\nat = 2024-01-01T17:00:00Z\n")
    assert main(["-c", str(path), "1"]) == 1
    assert capsys.readouterr().err.startswith("Error: Point #2")
