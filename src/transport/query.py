"""Filtering of parsed routes for the listing page.

All functions here are pure: the presentation layer passes its current
toggle, selected code and search text on every refresh.
"""

from collections.abc import Iterable

from src.transport.models import Route, ScheduleSet

ALL_ROUTES_LABEL = "All routes"


def filter_routes(
    routes: Iterable[Route],
    selected_code: str | None = "",
    query: str | None = "",
) -> list[Route]:
    """Return the routes matching both the selected code and the query.

    Args:
        routes: Routes in display order.
        selected_code: Exact route code to keep; empty keeps every code.
        query: Case-insensitive substring searched in code, name, details
            and all times; empty matches everything.

    Returns:
        Matching routes in their original order. May be empty.
    """
    needle = (query or "").lower()

    matches: list[Route] = []
    for route in routes:
        if selected_code and route.code != selected_code:
            continue
        if needle and needle not in route.search_text():
            continue
        matches.append(route)
    return matches


def select_routes(
    schedule: ScheduleSet,
    *,
    friday: bool = False,
    selected_code: str | None = "",
    query: str | None = "",
) -> list[Route]:
    """Pick the regular or Friday partition, then filter it."""
    return filter_routes(schedule.routes(friday), selected_code, query)


def route_options(routes: Iterable[Route]) -> list[tuple[str, str]]:
    """(value, label) pairs for the route dropdown, "All routes" first."""
    options = [("", ALL_ROUTES_LABEL)]
    options.extend((route.code, route.display) for route in routes)
    return options
