# bikeflow/viz/maps/render.py
import folium

from bikeflow import config
from bikeflow.traffic.aggregate import max_traffic
from bikeflow.traffic.scales import RadiusScale, ScaleMode
from bikeflow.traffic.time_filter import NO_FILTER
from bikeflow.viz.overlays.bike_lanes import add_bike_lanes
from bikeflow.viz.overlays.stations import add_station_markers
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.time_slider import build_time_slider


def build_traffic_map(*, stations, t_cur=NO_FILTER, domain_max=None, bike_lanes=True):
    """
    Folium map with bike lanes and one traffic circle per station.

    stations must already be aggregated for t_cur. domain_max is the busiest
    station over ALL trips so circle sizes stay comparable across slider
    positions; only the radius range changes when a filter is on. Without it
    the busiest of the given stations is used.
    """
    m = folium.Map(
        location=[config.CENTER_LAT, config.CENTER_LON],
        zoom_start=config.ZOOM_START,
        min_zoom=config.MIN_ZOOM,
        max_zoom=config.MAX_ZOOM,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    if bike_lanes:
        add_bike_lanes(m)

    if domain_max is None:
        domain_max = max_traffic(stations)

    radius_scale = RadiusScale(domain_max, ScaleMode.for_filter(t_cur))
    add_station_markers(m, stations, radius_scale)

    return m


def render_map_document(
    *,
    stations,
    t_cur=NO_FILTER,
    domain_max: int | None = None,
    title: str | None = None,
    bike_lanes: bool = True,
):
    """
    Single place that assembles the full HTML page: map, slider, legend, title.
    """
    m = build_traffic_map(
        stations=stations,
        t_cur=t_cur,
        domain_max=domain_max,
        bike_lanes=bike_lanes,
    )

    # title + wrap so widgets sit on-map
    m.get_root().html.add_child(
        folium.Element(
            f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 90vh !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  const existingTitle = document.getElementById("map-title");
  if (existingTitle) existingTitle.remove();

  {"const t=document.createElement('div');t.id='map-title';t.textContent=%r;wrap.appendChild(t);" % title if title else ""}

  // slider panel sits on the map
  const panel = document.getElementById("time-filter");
  if (panel) wrap.appendChild(panel);
}});
</script>
"""
        )
    )

    m.get_root().html.add_child(build_time_slider(t_cur))
    m.get_root().html.add_child(build_legend_widget())

    return m.get_root().render()
