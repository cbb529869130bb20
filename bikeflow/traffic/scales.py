# bikeflow/traffic/scales.py
from __future__ import annotations

import math
from enum import Enum
from typing import Dict, Tuple

from bikeflow.traffic.time_filter import NO_FILTER

# departures -> steelblue, arrivals -> darkorange
DEPARTURES_COLOR = "#4682b4"
ARRIVALS_COLOR = "#ff8c00"

# quantize thresholds over [0, 1] -> {0, 0.5, 1}
FLOW_BUCKETS = (0.0, 0.5, 1.0)


class ScaleMode(Enum):
    UNFILTERED = "unfiltered"
    FILTERED = "filtered"

    @classmethod
    def for_filter(cls, time_filter: int) -> "ScaleMode":
        return cls.UNFILTERED if time_filter == NO_FILTER else cls.FILTERED


# filtered counts are smaller, so they get a wider radius range
RADIUS_RANGES: Dict[ScaleMode, Tuple[float, float]] = {
    ScaleMode.UNFILTERED: (3.0, 25.0),
    ScaleMode.FILTERED: (3.0, 50.0),
}


class RadiusScale:
    """
    Square-root scale from total traffic to marker radius.

    Domain is [0, max_traffic], range comes from RADIUS_RANGES[mode], so the
    circle AREA grows linearly with traffic. Zero traffic sits on the range
    floor; a zero domain puts every station on the floor.
    """

    def __init__(self, max_traffic: int, mode: ScaleMode = ScaleMode.UNFILTERED):
        self.max_traffic = max(0, int(max_traffic))
        self.mode = mode
        self.range = RADIUS_RANGES[mode]

    def __call__(self, traffic) -> float:
        lo, hi = self.range
        if self.max_traffic <= 0 or not traffic or traffic <= 0:
            return lo

        t = math.sqrt(min(traffic, self.max_traffic) / self.max_traffic)
        return lo + (hi - lo) * t

    def __repr__(self):
        return f"RadiusScale(domain=[0, {self.max_traffic}], range={list(self.range)})"


def departure_ratio(departures: int, total: int) -> float:
    if not total:
        return 0.0
    return departures / total


def flow_bucket(ratio: float) -> float:
    """
    [0, 1/3) -> 0, [1/3, 2/3) -> 0.5, [2/3, 1] -> 1

    NaN reads as bucket 0; infinities clamp to the end buckets.
    """
    if math.isnan(ratio):
        return FLOW_BUCKETS[0]
    if math.isinf(ratio):
        return FLOW_BUCKETS[-1] if ratio > 0 else FLOW_BUCKETS[0]

    n = len(FLOW_BUCKETS)
    i = int(math.floor(ratio * n))
    i = max(0, min(n - 1, i))
    return FLOW_BUCKETS[i]


def _hex_to_rgb(color: str) -> Tuple[int, int, int]:
    c = color.lstrip("#")
    return int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)


def flow_color(bucket: float) -> str:
    """
    Blend between ARRIVALS_COLOR (bucket 0) and DEPARTURES_COLOR (bucket 1).
    """
    w = max(0.0, min(1.0, float(bucket)))
    dep = _hex_to_rgb(DEPARTURES_COLOR)
    arr = _hex_to_rgb(ARRIVALS_COLOR)
    rgb = [round(d * w + a * (1 - w)) for d, a in zip(dep, arr)]
    return "#{:02x}{:02x}{:02x}".format(*rgb)
