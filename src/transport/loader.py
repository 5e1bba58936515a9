"""Loading the schedule workbook from a URL or a local file.

The workbook is fetched once, its first sheet decoded with openpyxl, and the
rows handed to parse_schedule(). Fetching is the only fallible step: errors
are classified as TransientError (retried) or PermanentError (raised as-is).
"""

import io
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import NamedTuple

import requests
from openpyxl import load_workbook
from openpyxl.utils.datetime import to_excel
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from src.transport.config import TransportConfig, get_config
from src.transport.errors import (
    RateLimitError,
    SourceNotFoundError,
    TransientError,
    WorkbookFormatError,
)
from src.transport.logging import get_logger
from src.transport.models import Cell, ScheduleSet
from src.transport.parser import parse_schedule
from src.transport.timefmt import cell_text

log = get_logger(__name__)

# Shown when the source gives no modification time
UNKNOWN_UPDATE = "N/A"


class SourcePayload(NamedTuple):
    data: bytes
    last_update: str


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _fetch_url(url: str, timeout: float) -> SourcePayload:
    try:
        resp = requests.get(url, timeout=timeout)
    except (requests.Timeout, requests.ConnectionError) as e:
        log.warning("schedule_fetch_failed", url=url, error=str(e))
        raise TransientError(f"Fetching {url} failed: {e}") from e
    except requests.RequestException as e:
        # Broken downloads, redirect loops and the like
        log.warning("schedule_fetch_failed", url=url, error=str(e), type=type(e).__name__)
        raise TransientError(f"Fetching {url} failed: {e}") from e

    if resp.status_code == 404:
        raise SourceNotFoundError(f"Schedule workbook not found: {url}")
    if resp.status_code == 429:
        raise RateLimitError(f"Rate limited while fetching {url}")
    if resp.status_code >= 500:
        log.warning("schedule_fetch_failed", url=url, status=resp.status_code)
        raise TransientError(f"Fetching {url} returned {resp.status_code}")
    if resp.status_code != 200:
        raise SourceNotFoundError(
            f"Fetching {url} returned {resp.status_code}"
        )

    last_update = resp.headers.get("Last-Modified") or UNKNOWN_UPDATE
    return SourcePayload(resp.content, last_update)


def _read_file(path: Path) -> SourcePayload:
    if not path.is_file():
        raise SourceNotFoundError(f"Schedule workbook not found: {path}")

    try:
        mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
        data = path.read_bytes()
    except OSError as e:
        raise SourceNotFoundError(f"Cannot read schedule workbook {path}: {e}") from e
    return SourcePayload(data, mtime.strftime("%Y-%m-%d %H:%M"))


@retry(
    stop=stop_after_attempt(3),
    wait=wait_fixed(2),
    retry=retry_if_exception_type(TransientError),
    reraise=True,
)
def fetch_source(source: str, *, timeout: float = 30.0) -> SourcePayload:
    """Fetch the workbook bytes and a last-update string.

    Args:
        source: http(s) URL or local file path.
        timeout: HTTP timeout in seconds.

    Returns:
        SourcePayload with raw bytes and the Last-Modified header or file
        mtime ("N/A" when the server sends none).

    Raises:
        SourceNotFoundError: 404 / non-success status, or missing file.
        RateLimitError: 429 after all attempts.
        TransientError: Network failure or 5xx after all attempts.
    """
    if _is_url(source):
        payload = _fetch_url(source, timeout)
    else:
        payload = _read_file(Path(source))

    log.info(
        "schedule_fetched",
        source=source,
        size=len(payload.data),
        last_update=payload.last_update,
    )
    return payload


def _decode_cell(value: object) -> Cell:
    # Time-formatted cells come back as datetime objects; turn them back into
    # the serial numbers stored in the sheet
    if isinstance(value, (datetime, date, time, timedelta)):
        return to_excel(value)
    if value is None or isinstance(value, (str, int, float)):
        return value
    return str(value)


def read_workbook(data: bytes) -> tuple[str, list[list[Cell]]]:
    """Decode the first sheet of a workbook.

    Args:
        data: Raw .xlsx bytes.

    Returns:
        (heading, rows): heading is cell A1 as trimmed text, rows are the
        sheet's rows in order with cell values decoded.

    Raises:
        WorkbookFormatError: If the bytes are not a readable workbook.
    """
    try:
        workbook = load_workbook(io.BytesIO(data), data_only=True)
    except Exception as e:
        raise WorkbookFormatError(f"Unreadable schedule workbook: {e}") from e

    try:
        if not workbook.worksheets:
            raise WorkbookFormatError("Schedule workbook has no sheets")

        sheet = workbook.worksheets[0]
        heading = cell_text(_decode_cell(sheet["A1"].value))
        rows = [
            [_decode_cell(value) for value in row]
            for row in sheet.iter_rows(values_only=True)
        ]
    finally:
        workbook.close()

    log.debug("workbook_read", sheet=sheet.title, rows=len(rows))
    return heading, rows


def load_schedule(
    source: str | None = None, *, config: TransportConfig | None = None
) -> ScheduleSet:
    """Fetch, decode and parse the schedule workbook.

    Args:
        source: URL or path; defaults to config.schedule_source.
        config: Settings to use instead of the global config.

    Returns:
        Parsed ScheduleSet with heading and last-update metadata.
    """
    config = config or get_config()
    source = source or config.schedule_source

    payload = fetch_source(source, timeout=config.request_timeout_seconds)
    heading, rows = read_workbook(payload.data)
    return parse_schedule(rows, heading=heading, last_update=payload.last_update)
