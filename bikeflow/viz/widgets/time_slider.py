# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.traffic.time_filter import MINUTES_PER_DAY, NO_FILTER
from bikeflow.viz.time_format import ANY_TIME_LABEL, time_label


def build_time_slider(t_current, *, key="t"):
    """
    Range input over [-1, 1439]; -1 means "any time".

    The label follows the thumb while dragging; releasing the slider reloads
    the page with ?t=<value> so the server re-filters and re-aggregates.
    """
    label = time_label(t_current)
    any_display = "block" if t_current == NO_FILTER else "none"

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 14px;
  border-radius: 10px;
  font-size: 13px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter input {{
  width: 240px;
}}
#selected-time {{
  display: block;
  font-weight: 600;
}}
#any-time {{
  color: #777;
  font-style: italic;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range" min="{NO_FILTER}" max="{MINUTES_PER_DAY - 1}"
           value="{t_current}">
  </label>
  <time id="selected-time">{'' if t_current == NO_FILTER else label}</time>
  <em id="any-time" style="display:{any_display};">{ANY_TIME_LABEL}</em>
</div>

<script>
function formatSliderTime(minutes) {{
  const date = new Date(0, 0, 0, Math.floor(minutes / 60), minutes % 60);
  return date.toLocaleString("en-US", {{ timeStyle: "short" }});
}}

function updateTimeDisplay() {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  const t = Number(slider.value);

  if (t === {NO_FILTER}) {{
    selected.textContent = "";
    anyTime.style.display = "block";
  }} else {{
    selected.textContent = formatSliderTime(t);
    anyTime.style.display = "none";
  }}
}}

function applyTimeFilter() {{
  const t = Number(document.getElementById("time-slider").value);
  const url = new URL(window.location.href);
  if (t === {NO_FILTER}) {{
    url.searchParams.delete("{key}");
  }} else {{
    url.searchParams.set("{key}", String(t));
  }}
  window.location.href = url.toString();
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  if (!slider) return;
  slider.addEventListener("input", updateTimeDisplay);
  slider.addEventListener("change", applyTimeFilter);
}});
</script>
"""
    )
