"""Pydantic models for the parsed transport schedule.

All data structures use Pydantic v2. Routes and schedule sets are frozen:
the parser builds them once and callers only read them.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, computed_field

# One spreadsheet cell: None / blank text (Empty), str (Text), int | float (Number)
Cell = str | int | float | None

# One source row: column 0 code/marker, 1 outbound time, 2 name, 3 details, 4 return time
RawRow = Sequence[Cell]

DISPLAY_SEPARATOR = " — "


class Route(BaseModel):
    """One scheduled service with its outbound and return times.

    Times are normalized strings ("8:00 AM", "5:30 to 6:00 PM"), deduplicated
    in first-seen order.
    """

    model_config = ConfigDict(frozen=True)

    code: str  # "R12", "F3"
    name: str = ""  # display label, e.g. "Mirpur"
    details: str = ""  # stops / via text
    to_dsc: tuple[str, ...] = ()  # start times towards the campus
    from_dsc: tuple[str, ...] = ()  # departure times from the campus
    is_friday: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display(self) -> str:
        if self.name:
            return f"{self.code}{DISPLAY_SEPARATOR}{self.name}".strip()
        return self.code.strip()

    @property
    def badge(self) -> str:
        return "Friday" if self.is_friday else "Regular"

    def search_text(self) -> str:
        """Lower-cased haystack matched by free-text queries."""
        parts = [self.code, self.name, self.details, *self.to_dsc, *self.from_dsc]
        return " ".join(parts).lower()


class ScheduleMeta(BaseModel):
    """Document metadata shown alongside the listing."""

    heading: str = ""  # cell A1 of the first sheet
    last_update: str = ""  # "N/A" when the source does not say


class ScheduleSet(BaseModel):
    """Parser output: regular and Friday partitions plus metadata."""

    model_config = ConfigDict(frozen=True)

    regular: tuple[Route, ...] = ()
    friday: tuple[Route, ...] = ()
    meta: ScheduleMeta = Field(default_factory=ScheduleMeta)

    @property
    def all(self) -> tuple[Route, ...]:
        return self.regular + self.friday

    def routes(self, friday: bool = False) -> tuple[Route, ...]:
        """Partition selected by the Friday toggle."""
        return self.friday if friday else self.regular
