# bikeflow/main.py

from bikeflow import config
from bikeflow.viz.app.single import serve_traffic_map


STATIONS = config.DEFAULT_STATIONS_URL
TRIPS = config.DEFAULT_TRIPS_URL


def main():
    serve_traffic_map(
        stations_source=STATIONS,
        trips_source=TRIPS,
        port=8080,
        title="Bluebikes Station Traffic",
    )


if __name__ == "__main__":
    main()
