import io
import os
import sys

import pytest

from termsheet.util import (
    DEFAULT_CELL_MIN_WIDTH,
    DEFAULT_VIEWPORT_COLS,
    DEFAULT_VIEWPORT_ROWS,
    MAX_COLS,
    column_name,
    column_number,
    format_cell_ref,
    min_max,
    parse_cell_ref,
    pretty_path,
    terminal_size,
    viewport_size,
)


class _FakeStdout:
    def fileno(self):
        return 1


def test_first_columns():
    assert column_name(1) == "A"
    assert column_name(27) == "AA"


def test_last_column_name():
    assert column_name(MAX_COLS) == "BGQCV"


def test_zero_column_has_no_name():
    assert column_name(0) == ""


@pytest.mark.parametrize("col", [1, 2, 25, 26, 27, 52, 53, 702, 703, 18278, MAX_COLS])
def test_column_round_trip(col):
    assert column_number(column_name(col)) == col


@pytest.mark.parametrize("name", ["a", "A1", "A-B", "Ä"])
def test_invalid_column_letters(name):
    assert column_number(name) == 0


def test_parse_cell_ref_ignores_case_and_space():
    assert parse_cell_ref(" b12 ") == (12, column_number("B"))
    assert parse_cell_ref("aa7") == (7, column_number("AA"))


@pytest.mark.parametrize("row, col", [(1, 1), (12, 26), (1048576, 27), (99, MAX_COLS)])
def test_cell_ref_round_trip(row, col):
    assert parse_cell_ref(format_cell_ref(row, col)) == (row, col)


def test_min_max_orders_values():
    assert min_max(5, 3) == (3, 5)
    assert min_max(3, 5) == (3, 5)
    assert min_max(4, 4) == (4, 4)


def test_terminal_size_fallback(monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert terminal_size() == (80, 24)


def test_terminal_size_reads_stdout(monkeypatch):
    monkeypatch.setattr(sys, "stdout", _FakeStdout())
    monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((132, 50)))
    assert terminal_size() == (132, 50)


def test_viewport_size_fits_cells(monkeypatch):
    width = DEFAULT_CELL_MIN_WIDTH * (DEFAULT_VIEWPORT_COLS + 1) + 2
    height = DEFAULT_VIEWPORT_ROWS + 3
    monkeypatch.setattr(sys, "stdout", _FakeStdout())
    monkeypatch.setattr(
        os, "get_terminal_size", lambda fd: os.terminal_size((width, height))
    )
    assert viewport_size() == (DEFAULT_VIEWPORT_COLS, DEFAULT_VIEWPORT_ROWS)


@pytest.fixture
def home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/tester")
    monkeypatch.setenv("USERPROFILE", "/home/tester")
    return "/home/tester"


def test_pretty_path_under_home(home):
    assert pretty_path(home + "/docs/book.gsheet", "") == "docs > book.gsheet"


def test_pretty_path_recent_files_drops_file_name(home):
    assert pretty_path(home + "/docs/book.gsheet", "recentfiles") == "docs"


def test_pretty_path_outside_home(home):
    full = "/srv/data/report.json"
    assert pretty_path(full, "").split(" > ") == full.split("/")


def test_pretty_path_single_part_kept_in_recent_mode(home):
    assert pretty_path(home + "/book.gsheet", "recentfiles") == "book.gsheet"