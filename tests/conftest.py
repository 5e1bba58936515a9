"""Shared fixtures for the transport schedule tests.

Also ensures the project root is on sys.path so 'import src.*' works.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))


SAMPLE_ROWS = [
    ["Transport Schedule Final Exam Semester-Summer-2025"],
    [],
    ["Route No", "Start Time (to DSC)", "Route Name", "Route Details", "Departure (from DSC)"],
    ["R1", "7:00 AM", "Dhanmondi", "Dhanmondi - Asad Gate - DSC", "1:10 PM"],
    ["", "10:00 AM", "", "", "4:20 PM"],
    ["", "7:00 AM", "", "", "1:10 PM"],
    ["R2", 0.3125, "Mirpur", "Mirpur-10 - Mirpur-1 - DSC", 0.7083333333333334],
    ["Friday Schedule"],
    ["Route No", "Start Time", "Route Name", "Route Details", "Departure"],
    ["F1", "8.30am", "Uttara", "Uttara - Abdullahpur - DSC", "5:30 to 6:00 PM"],
]


@pytest.fixture
def sample_rows() -> list[list]:
    return [list(row) for row in SAMPLE_ROWS]


@pytest.fixture
def make_workbook():
    """Build .xlsx bytes from a list of rows, first sheet only."""
    from openpyxl import Workbook

    def _build(rows: list[list]) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Schedule"
        for row in rows:
            sheet.append(row)
        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    return _build
