"""Transport schedule parser.

Reads the transport schedule workbook and turns it into searchable route
records split into regular and Friday schedules.
"""

from src.transport.loader import load_schedule, read_workbook
from src.transport.models import Route, ScheduleMeta, ScheduleSet
from src.transport.parser import parse_schedule
from src.transport.query import filter_routes, route_options, select_routes
from src.transport.timefmt import normalize_time

__all__ = [
    "Route",
    "ScheduleMeta",
    "ScheduleSet",
    "filter_routes",
    "load_schedule",
    "normalize_time",
    "parse_schedule",
    "read_workbook",
    "route_options",
    "select_routes",
]
