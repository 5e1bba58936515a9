"""Tests for normalize_time() and format_12h()."""

from __future__ import annotations

import pytest

from src.transport.timefmt import cell_text, format_12h, normalize_time


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0.5, "12:00 PM"),
        (0.25, "6:00 AM"),
        (0, "12:00 AM"),
        (0.75, "6:00 PM"),
        (0.8, "7:12 PM"),
        (18.5, "6:30 PM"),
        (7.25, "7:15 AM"),
        (12, "12:00 PM"),
    ],
)
def test_numeric_times(raw, expected):
    assert normalize_time(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (1, "1"),
        (1.0, "1"),
        (24, "24"),
        (30.5, "30.5"),
        (-0.25, "-0.25"),
        (45123, "45123"),
    ],
)
def test_numbers_outside_ranges_pass_through(raw, expected):
    assert normalize_time(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_empty_values(raw):
    assert normalize_time(raw) == ""


def test_range_is_kept_verbatim():
    assert normalize_time("5:30 to 6:00 PM") == "5:30 to 6:00 PM"
    assert normalize_time("5:30  TO\t6:00 pm") == "5:30 TO 6:00 pm"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("6.05pm", "6:05 PM"),
        ("6.05 PM", "6:05 PM"),
        ("11.30 am", "11:30 AM"),
        ("6:05 pm", "6:05 PM"),
        ("6:05pm", "6:05PM"),
        (" 7:00   AM ", "7:00 AM"),
    ],
)
def test_text_times(raw, expected):
    assert normalize_time(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("08:00", "8:00 AM"),
        ("9:00", "9:00 AM"),
        ("13:45", "1:45 PM"),
        ("00:10", "12:10 AM"),
    ],
)
def test_24_hour_text_is_converted(raw, expected):
    assert normalize_time(raw) == expected


@pytest.mark.parametrize("raw", ["25:00", "Tomorrow", "After exam", "7.5"])
def test_unrecognized_text_passes_through(raw):
    assert normalize_time(raw) == raw


def test_format_12h():
    assert format_12h(0, 0) == "12:00 AM"
    assert format_12h(12, 5) == "12:05 PM"
    assert format_12h(23, 59) == "11:59 PM"
    assert format_12h(9, 7) == "9:07 AM"


def test_cell_text():
    assert cell_text(None) == ""
    assert cell_text(5.0) == "5"
    assert cell_text(2.5) == "2.5"
    assert cell_text("  R1 ") == "R1"


def test_huge_integer_passes_through():
    assert normalize_time(10**400) == str(10**400)
