# bikeflow/util/stations.py
from __future__ import annotations

import json
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Dict, List

from bikeflow.errors import DatasetLoadError
from bikeflow.traffic.types import Station
from bikeflow.util import log


def is_url(source) -> bool:
    return str(source).startswith(("http://", "https://"))


def _http_get_text(url: str, timeout: int = 30) -> str:
    req = urllib.request.Request(
        url,
        headers={
            "User-Agent": "bikeflow/1.0",
            "Accept": "application/json",
        },
    )
    with urllib.request.urlopen(req, timeout=timeout) as resp:
        return resp.read().decode("utf-8", errors="replace")


def _read_json(source) -> Dict[str, Any]:
    try:
        if is_url(source):
            raw = _http_get_text(str(source))
        else:
            raw = Path(source).read_text(encoding="utf-8")
        return json.loads(raw)

    except urllib.error.HTTPError as e:
        raise DatasetLoadError(source, f"HTTP {e.code} {e.reason}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetLoadError(source, repr(e)) from e


def _coord(value) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def load_stations(source) -> List[Station]:
    """
    Load Bluebikes stations from a GBFS-style JSON document (path or URL).
    Expects {"data": {"stations": [{short_name, name, lon, lat}, ...]}}.
    """
    log.info(f"Loading stations from {source}…")

    try:
        raw = _read_json(source)
        rows = raw["data"]["stations"]
        if not isinstance(rows, list):
            raise DatasetLoadError(source, "data.stations is not a list")
    except (KeyError, TypeError) as e:
        err = DatasetLoadError(source, f"missing data.stations ({e!r})")
        log.error(str(err))
        raise err from e
    except DatasetLoadError as e:
        log.error(str(e))
        raise

    stations: List[Station] = []
    for i, s in enumerate(rows):
        if not isinstance(s, dict):
            err = DatasetLoadError(source, f"data.stations[{i}] is not an object: {s!r}")
            log.error(str(err))
            raise err

        stations.append(Station(
            short_name=str(s.get("short_name", "")),
            name=s.get("name"),
            lon=_coord(s.get("lon")),
            lat=_coord(s.get("lat")),
        ))

    log.done(f"Loaded {len(stations):,} stations")
    return stations
