# bikeflow/traffic/time_filter.py
from __future__ import annotations

from datetime import datetime
from typing import Iterable, List

from bikeflow.traffic.types import Trip

NO_FILTER = -1
WINDOW_MINUTES = 60
MINUTES_PER_DAY = 1440


def minutes_since_midnight(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute


def filter_trips_by_time(trips: Iterable[Trip], target_minutes: int) -> List[Trip]:
    """
    Keep trips that start OR end within WINDOW_MINUTES of target_minutes
    (time of day only, the calendar date is ignored).

    target_minutes == NO_FILTER passes every trip through.
    Survivors keep their input order.
    """
    if target_minutes == NO_FILTER:
        return list(trips)

    t = int(target_minutes)
    kept: List[Trip] = []
    for trip in trips:
        start_min = minutes_since_midnight(trip.started_at)
        end_min = minutes_since_midnight(trip.ended_at)
        if abs(start_min - t) <= WINDOW_MINUTES or abs(end_min - t) <= WINDOW_MINUTES:
            kept.append(trip)
    return kept


def parse_time_filter(raw) -> int:
    """
    Slider / query-string value -> NO_FILTER or a minute in [0, 1439].
    Missing or unparsable input means "no filter"; numbers are clamped.
    """
    if raw is None or raw == "":
        return NO_FILTER

    try:
        t = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return NO_FILTER

    if t < 0:
        return NO_FILTER
    return min(t, MINUTES_PER_DAY - 1)
