# bikeflow/viz/overlays/bike_lanes.py
import json

import folium

BIKE_LANE_SOURCES = {
    "boston_route": (
        "https://bostonopendata-boston.opendata.arcgis.com/datasets/"
        "boston::existing-bike-network-2022.geojson"
    ),
    "cambridge_route": (
        "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/"
        "Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson"
    ),
}

BIKE_LANE_STYLE = {
    "color": "#32D400",
    "weight": 4,
    "opacity": 0.6,
}


def build_bike_lanes(map_name, sources=None):
    """
    Bike lane line layers, fetched by the browser after the map exists
    (the GeoJSON files are large and the server never downloads them).
    A source that fails to load is reported in the console and skipped.
    """
    if sources is None:
        sources = BIKE_LANE_SOURCES

    return folium.Element(
        f"""
<script>
document.addEventListener("DOMContentLoaded", () => {{
  const map = window[{json.dumps(map_name)}];
  if (!map) return;

  const sources = {json.dumps(sources)};
  const style = {json.dumps(BIKE_LANE_STYLE)};

  Object.entries(sources).forEach(([name, url]) => {{
    fetch(url)
      .then((r) => r.json())
      .then((data) => L.geoJSON(data, {{ style: () => style }}).addTo(map))
      .catch((err) => console.error("Error loading bike lanes", name, err));
  }});
}});
</script>
"""
    )


def add_bike_lanes(m, sources=None):
    m.get_root().html.add_child(build_bike_lanes(m.get_name(), sources))
