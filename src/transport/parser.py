"""Schedule parser - turns the decoded spreadsheet grid into route records.

Sheet layout (first sheet, row-major, no schema header):

  row 0        title text in A1 ("Transport Schedule ... Summer 2025")
  header rows  "Route No" | "Start Time" | "Route Name" | "Route Details" | "Departure"
  route rows   R1 | 7:00 AM | Mirpur | Mirpur-10 > ... | 1:10 PM
  continuation "" | 10:00 AM | "" | "" | 4:20 PM   (more times for the route above)
  marker row   "Friday Schedule"   (every route after this is a Friday route)

The parser makes a single forward pass holding the route currently being
filled and the current mode (regular or Friday). Rows it does not recognize
are skipped; it never raises on malformed input.
"""

import re
from collections.abc import Iterable
from enum import Enum

from src.transport.logging import get_logger
from src.transport.models import Cell, RawRow, Route, ScheduleMeta, ScheduleSet
from src.transport.timefmt import cell_text, is_blank, normalize_time

log = get_logger(__name__)

ROW_WIDTH = 5

FRIDAY_MARKER_RE = re.compile(r"friday\s*schedule", re.IGNORECASE)
HEADER_CODE_RE = re.compile(r"route\s*no", re.IGNORECASE)
HEADER_DETAILS_RE = re.compile(r"route\s*details", re.IGNORECASE)
ROUTE_CODE_RE = re.compile(r"^[RF]\d+", re.IGNORECASE)


class RowKind(str, Enum):
    """How a single row is treated by the parser."""

    BLANK = "blank"
    FRIDAY_MARKER = "friday_marker"
    HEADER = "header"
    ROUTE = "route"
    CONTINUATION = "continuation"
    IGNORED = "ignored"


def _pad(row: RawRow | None) -> list[Cell]:
    cells = list(row or [])[:ROW_WIDTH]
    return cells + [None] * (ROW_WIDTH - len(cells))


def classify_row(row: RawRow | None, has_current: bool) -> RowKind:
    """Classify one row.

    Args:
        row: Source row, possibly shorter than five cells.
        has_current: Whether a route is currently open for continuation rows.

    Returns:
        The RowKind the parser applies to this row.
    """
    cells = _pad(row)
    code = cell_text(cells[0])
    details = cell_text(cells[3])

    if all(is_blank(cell) for cell in cells):
        return RowKind.BLANK
    if FRIDAY_MARKER_RE.search(code):
        return RowKind.FRIDAY_MARKER
    if HEADER_CODE_RE.search(code) or HEADER_DETAILS_RE.search(details):
        return RowKind.HEADER
    if ROUTE_CODE_RE.match(code):
        return RowKind.ROUTE
    # Only a truly empty code cell continues the open route
    if has_current and not code:
        return RowKind.CONTINUATION
    return RowKind.IGNORED


def _append_times(draft: dict, cells: list[Cell]) -> None:
    if not is_blank(cells[1]):
        draft["to_dsc"].append(normalize_time(cells[1]))
    if not is_blank(cells[4]):
        draft["from_dsc"].append(normalize_time(cells[4]))


def _open_route(cells: list[Cell], friday_mode: bool) -> dict:
    code = cell_text(cells[0])
    draft = {
        "code": code,
        "name": cell_text(cells[2]),
        "details": cell_text(cells[3]),
        "to_dsc": [],
        "from_dsc": [],
        "is_friday": friday_mode or code.upper().startswith("F"),
    }
    _append_times(draft, cells)
    return draft


def _finish(draft: dict) -> Route:
    # dict.fromkeys keeps the first occurrence of each time in order
    return Route(
        code=draft["code"],
        name=draft["name"],
        details=draft["details"],
        to_dsc=tuple(dict.fromkeys(draft["to_dsc"])),
        from_dsc=tuple(dict.fromkeys(draft["from_dsc"])),
        is_friday=draft["is_friday"],
    )


def parse_schedule(
    rows: Iterable[RawRow | None],
    *,
    heading: str = "",
    last_update: str = "",
) -> ScheduleSet:
    """Parse spreadsheet rows into regular and Friday routes.

    Args:
        rows: Decoded rows of the first sheet, in sheet order.
        heading: Document heading (cell A1), passed through to the metadata.
        last_update: Last-update text, passed through to the metadata.

    Returns:
        ScheduleSet with both partitions in sheet order.
    """
    regular: list[dict] = []
    friday: list[dict] = []
    current: dict | None = None
    friday_mode = False
    ignored = 0

    for index, row in enumerate(rows):
        cells = _pad(row)
        kind = classify_row(cells, current is not None)

        if kind is RowKind.BLANK:
            continue

        if kind is RowKind.FRIDAY_MARKER:
            friday_mode = True
            current = None
            continue

        if kind is RowKind.HEADER:
            current = None
            continue

        if kind is RowKind.ROUTE:
            current = _open_route(cells, friday_mode)
            (friday if friday_mode else regular).append(current)
            continue

        if kind is RowKind.CONTINUATION and current is not None:
            _append_times(current, cells)
            continue

        # Unrecognized code cell: the open route stays open
        ignored += 1
        log.debug("row_ignored", index=index, code=cell_text(cells[0]))

    schedule = ScheduleSet(
        regular=tuple(_finish(draft) for draft in regular),
        friday=tuple(_finish(draft) for draft in friday),
        meta=ScheduleMeta(heading=heading, last_update=last_update),
    )

    log.info(
        "schedule_parsed",
        regular=len(schedule.regular),
        friday=len(schedule.friday),
        ignored_rows=ignored,
    )
    return schedule
