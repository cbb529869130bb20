# bikeflow/traffic/aggregate.py
from __future__ import annotations

from collections import Counter
from dataclasses import replace
from typing import Iterable, List

from bikeflow.traffic.types import Station, Trip


def normalize_station_id(value) -> str:
    """
    Canonical form of a station key: stringified, surrounding whitespace removed.
    Used for both Station.short_name and the trip endpoint ids.
    """
    if value is None:
        return ""
    return str(value).strip()


def count_by_station(trips: Iterable[Trip], key: str) -> Counter:
    """
    key: "start_station_id" (departures) or "end_station_id" (arrivals)
    """
    counts: Counter = Counter()
    for trip in trips:
        counts[normalize_station_id(getattr(trip, key))] += 1
    return counts


def compute_station_traffic(
    stations: Iterable[Station],
    trips: Iterable[Trip],
) -> List[Station]:
    """
    Per-station arrivals / departures / total_traffic for the given trips.

    Returns new Station objects in the input order; neither the stations nor
    the trips passed in are modified. Trips whose ids match no station are
    ignored, stations with no trips get zeros.
    """
    trips = list(trips)
    departures = count_by_station(trips, "start_station_id")
    arrivals = count_by_station(trips, "end_station_id")

    out: List[Station] = []
    for s in stations:
        sid = normalize_station_id(s.short_name)
        a = arrivals.get(sid, 0)
        d = departures.get(sid, 0)
        out.append(replace(s, arrivals=a, departures=d, total_traffic=a + d))

    return out


def max_traffic(stations: Iterable[Station]) -> int:
    return max((s.total_traffic for s in stations), default=0)
