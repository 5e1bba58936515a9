"""Normalization of schedule time cells into display strings.

Cells arrive in three shapes and each is handled on its own branch:

  Empty   None or blank text          -> ""
  Number  spreadsheet day fraction    -> "6:00 PM"  (0.75)
          or hour with fraction       -> "6:30 PM"  (18.5)
  Text    "6.05pm", "08:00", "5:30 to 6:00 PM", free text

normalize_time() never raises. Anything it cannot recognize is returned as
text, unchanged apart from whitespace collapsing.
"""

import math
import re

from src.transport.models import Cell

MINUTES_PER_DAY = 24 * 60

_WHITESPACE_RE = re.compile(r"\s+")
# Literal ranges such as "5:30 to 6:00 PM" are kept verbatim
_RANGE_RE = re.compile(r"\bto\b", re.IGNORECASE)
# "6.05pm" / "6.05 PM"
_DOTTED_RE = re.compile(r"^(\d{1,2})\.(\d{2})\s*(AM|PM)$", re.IGNORECASE)
# "08:00" (24-hour, no suffix)
_CLOCK_24_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
# "6:05 PM" / "6:05pm"
_CLOCK_RE = re.compile(r"^\d{1,2}:\d{2}(\s?(AM|PM))?$", re.IGNORECASE)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_12h(hour: int, minute: int) -> str:
    """Format a 24-hour clock value as "H:MM AM/PM"."""
    suffix = "PM" if hour >= 12 else "AM"
    hour_12 = 12 if hour % 12 == 0 else hour % 12
    return f"{hour_12}:{minute:02d} {suffix}"


def is_number(value: Cell) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def cell_text(value: Cell) -> str:
    """Render a cell the way the sheet displays it, trimmed.

    Whole numbers lose their trailing ".0" (24.0 -> "24").
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_blank(value: Cell) -> bool:
    """True for None and for text that is empty after trimming."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _normalize_number(value: float) -> str | None:
    if math.isnan(value):
        return None

    if 0 <= value < 1:
        total_minutes = _round_half_up(value * MINUTES_PER_DAY)
        return format_12h(total_minutes // 60, total_minutes % 60)

    if 1 < value < 24:
        hour = math.floor(value)
        minute = _round_half_up((value - hour) * 60)
        return format_12h(hour, minute)

    # 1, >= 24 and negatives fall through to the text path
    return None


def _normalize_text(text: str) -> str:
    text = _WHITESPACE_RE.sub(" ", text).strip()

    if _RANGE_RE.search(text):
        return text

    text = _DOTTED_RE.sub(r"\1:\2 \3", text)

    match = _CLOCK_24_RE.match(text)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour <= 23 and minute <= 59:
            return format_12h(hour, minute)
        return text

    if _CLOCK_RE.match(text):
        return text.upper()

    return text


def normalize_time(raw: Cell) -> str:
    """Normalize one time cell to a display string.

    Args:
        raw: Cell value from the outbound or return time column.

    Returns:
        "H:MM AM/PM" where the value is recognizable, otherwise the
        whitespace-collapsed text of the cell. Empty cells give "".
    """
    if is_blank(raw):
        return ""

    if is_number(raw):
        try:
            formatted = _normalize_number(float(raw))
        except OverflowError:
            formatted = None
        if formatted is not None:
            return formatted

    return _normalize_text(cell_text(raw))
