import os

from bikeflow import config
from bikeflow.viz.app.single import serve_traffic_map

STATIONS = os.environ.get("STATIONS_JSON", config.DEFAULT_STATIONS_URL)
TRIPS = os.environ.get("TRIPS_CSV", config.DEFAULT_TRIPS_URL)


def main():
  port = int(os.environ.get("PORT", str(config.DEFAULT_PORT)))

  serve_traffic_map(
      stations_source=STATIONS,
      trips_source=TRIPS,
      host=os.environ.get("HOST", "0.0.0.0"),
      port=port,
      title="Bluebikes Station Traffic",
  )


if __name__ == "__main__":
  main()
