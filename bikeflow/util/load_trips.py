# bikeflow/util/load_trips.py
from __future__ import annotations

from typing import List

import pandas as pd
from tqdm import tqdm

from bikeflow.errors import DatasetLoadError
from bikeflow.traffic.types import Trip
from bikeflow.util import log

COLUMNS = [
    "start_station_id",
    "end_station_id",
    "started_at",
    "ended_at",
]


def load_trips(source, *, progress: bool = True) -> List[Trip]:
    """
    Read a trips CSV (path or URL) into Trip objects, in file order.
    Only the four COLUMNS are used; station ids stay strings.
    """
    log.info(f"Loading trips from {source}…")

    try:
        df = pd.read_csv(
            source,
            usecols=COLUMNS,
            dtype={"start_station_id": str, "end_station_id": str},
            keep_default_na=False,
        )
        df["started_at"] = pd.to_datetime(df["started_at"])
        df["ended_at"] = pd.to_datetime(df["ended_at"])
    except ValueError as e:
        # missing columns and unparsable timestamps both land here
        err = DatasetLoadError(source, str(e))
        log.error(str(err))
        raise err from e
    except OSError as e:
        err = DatasetLoadError(source, repr(e))
        log.error(str(err))
        raise err from e

    rows = df.itertuples(index=False)
    if progress:
        rows = tqdm(rows, total=len(df), desc="Reading trips")

    trips = [
        Trip(
            start_station_id=r.start_station_id,
            end_station_id=r.end_station_id,
            started_at=r.started_at.to_pydatetime(),
            ended_at=r.ended_at.to_pydatetime(),
        )
        for r in rows
    ]

    log.done(f"Loaded {len(trips):,} trips")
    return trips
