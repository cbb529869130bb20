# bikeflow/viz/overlays/stations.py
import math

import folium

from bikeflow.traffic.scales import departure_ratio, flow_bucket, flow_color
from bikeflow.util import log

# where a station with unusable coordinates is drawn
PLACEHOLDER_POSITION = (0.0, 0.0)


def station_coords(station):
    """
    (lat, lon) for a station, or PLACEHOLDER_POSITION when either coordinate
    is missing / zero / not a finite number.
    """
    lat, lon = station.lat, station.lon
    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError):
        lat = lon = None

    if not lat or not lon or not (math.isfinite(lat) and math.isfinite(lon)):
        log.warn(f"Invalid station coordinates: {station.short_name!r} ({station.lat}, {station.lon})")
        return PLACEHOLDER_POSITION

    return lat, lon


def station_tooltip(station):
    label = station.name or station.short_name
    return (
        f"Station {label}: {station.total_traffic} trips "
        f"({station.departures} departures, {station.arrivals} arrivals)"
    )


def add_station_markers(m, stations, radius_scale):
    """
    One circle per station:
      - radius: sqrt scale of total traffic
      - fill: blend of arrivals / departures color by flow bucket
    """
    for s in stations:
        bucket = flow_bucket(departure_ratio(s.departures, s.total_traffic))
        color = flow_color(bucket)

        folium.CircleMarker(
            location=list(station_coords(s)),
            radius=radius_scale(s.total_traffic),
            fill=True,
            fill_color=color,
            fill_opacity=0.8,
            color="white",
            weight=1,
            opacity=0.8,
            tooltip=station_tooltip(s),
        ).add_to(m)
