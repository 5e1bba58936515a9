"""Error hierarchy for loading the schedule workbook.

Only the loader raises these. Parsing, time normalization and filtering are
total over their input and degrade instead of failing.

The transient/permanent split drives the tenacity retry on fetches:
    @retry(retry=retry_if_exception_type(TransientError), stop=stop_after_attempt(3))
    def fetch_source(source: str):
        ...
"""


class ScheduleError(Exception):
    """Base exception for all schedule loading errors."""

    pass


class TransientError(ScheduleError):
    """Temporary failure that may succeed on retry.

    Examples: network timeouts, connection resets, 503 Service Unavailable.
    """

    pass


class RateLimitError(TransientError):
    """Source host answered 429 Too Many Requests."""

    pass


class PermanentError(ScheduleError):
    """Failure that won't succeed on retry."""

    pass


class SourceNotFoundError(PermanentError):
    """Workbook URL answered 404 or the local file does not exist."""

    pass


class WorkbookFormatError(PermanentError):
    """Downloaded bytes are not a readable workbook, or it has no sheets."""

    pass
