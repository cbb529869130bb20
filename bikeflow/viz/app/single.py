# bikeflow/viz/app/single.py
from __future__ import annotations

from typing import Dict, List

from flask import Flask, jsonify, request

from bikeflow import config
from bikeflow.errors import DatasetLoadError
from bikeflow.traffic.aggregate import compute_station_traffic, max_traffic
from bikeflow.traffic.scales import departure_ratio, flow_bucket
from bikeflow.traffic.time_filter import NO_FILTER, filter_trips_by_time, parse_time_filter
from bikeflow.traffic.types import Station, Trip
from bikeflow.util import log
from bikeflow.util.load_trips import load_trips
from bikeflow.util.stations import load_stations
from bikeflow.viz.maps.render import render_map_document


class TrafficView:
    """
    Stations + trips for one session, loaded once.

    The all-day aggregation is computed up front; every other time filter
    re-runs filter -> aggregate on each call. Nothing is written back to
    self.stations, so calls never see each other's numbers.
    """

    def __init__(self, stations: List[Station], trips: List[Trip]):
        self.stations = stations
        self.trips = trips
        self.baseline = compute_station_traffic(stations, trips)
        self.baseline_max = max_traffic(self.baseline)
        self._cache: Dict[int, List[Station]] = {NO_FILTER: self.baseline}

    def stations_for(self, t: int) -> List[Station]:
        if t not in self._cache:
            filtered = filter_trips_by_time(self.trips, t)
            self._cache[t] = compute_station_traffic(self.stations, filtered)
        return self._cache[t]


def traffic_payload(stations: List[Station], t: int) -> dict:
    return {
        "t": t,
        "stations": [
            {
                "short_name": s.short_name,
                "name": s.name,
                "arrivals": s.arrivals,
                "departures": s.departures,
                "total_traffic": s.total_traffic,
                "flow": flow_bucket(departure_ratio(s.departures, s.total_traffic)),
            }
            for s in stations
        ],
    }


def create_app(view: TrafficView, *, title: str | None = None, bike_lanes: bool = True) -> Flask:
    app = Flask(__name__)

    @app.route("/")
    def _index():
        t_cur = parse_time_filter(request.args.get("t"))
        return render_map_document(
            stations=view.stations_for(t_cur),
            t_cur=t_cur,
            domain_max=view.baseline_max,
            title=title,
            bike_lanes=bike_lanes,
        )

    @app.route("/api/traffic")
    def _traffic():
        t_cur = parse_time_filter(request.args.get("t"))
        return jsonify(traffic_payload(view.stations_for(t_cur), t_cur))

    return app


def load_view(stations_source, trips_source) -> TrafficView:
    """
    Load both datasets or fail; the map is never built from partial data.
    """
    try:
        stations = load_stations(stations_source)
        trips = load_trips(trips_source)
    except DatasetLoadError:
        log.error("Dataset load failed, not starting the map")
        raise

    return TrafficView(stations, trips)


def serve_traffic_map(
    *,
    stations_source=config.DEFAULT_STATIONS_URL,
    trips_source=config.DEFAULT_TRIPS_URL,
    host: str = config.DEFAULT_HOST,
    port: int = config.DEFAULT_PORT,
    debug: bool = False,
    title: str | None = None,
):
    """
    Serve the station traffic map page.
    """
    view = load_view(stations_source, trips_source)
    app = create_app(view, title=title)

    log.done(f"Serving station traffic on http://{host}:{port}")
    app.run(host=host, port=int(port), debug=bool(debug))
