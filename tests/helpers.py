"""Shared builders for the bikeflow tests."""

from datetime import datetime

from bikeflow.traffic.types import Station, Trip


def at(minutes, day=1):
    return datetime(2024, 3, day, minutes // 60, minutes % 60)


def trip(start, end, started=480, ended=500, day=1):
    return Trip(
        start_station_id=start,
        end_station_id=end,
        started_at=at(started, day),
        ended_at=at(ended, day),
    )


def station(short_name, name=None, lat=42.36, lon=-71.09):
    return Station(short_name=short_name, name=name, lat=lat, lon=lon)
