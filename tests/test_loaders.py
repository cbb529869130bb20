"""Tests for the station JSON and trips CSV loaders."""

import io
import json
import tempfile
import unittest
import urllib.error
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

from bikeflow.errors import DatasetLoadError
from bikeflow.util.load_trips import load_trips
from bikeflow.util.stations import is_url, load_stations

STATIONS_DOC = {
    "data": {
        "stations": [
            {"short_name": "A32000", "name": "Fan Pier", "lon": -71.044, "lat": 42.353},
            {"short_name": " M32006 ", "name": "MIT at Mass Ave", "lon": "-71.09", "lat": "42.36"},
            {"short_name": "X1", "name": "Broken", "lon": None, "lat": "n/a"},
        ]
    }
}

TRIPS_CSV = """ride_id,start_station_id,end_station_id,started_at,ended_at,member_casual
r1,A32000,M32006,2024-03-01 08:05:00,2024-03-01 08:25:30,member
r2,M32006,A32000,2024-03-02 17:45:00,2024-03-02 18:02:00,casual
r3,00042,A32000,2024-03-03 23:59:00,2024-03-04 00:10:00,member
"""


class _TempDirTest(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, text):
        path = self.tmp / name
        path.write_text(text, encoding="utf-8")
        return path


class TestLoadStations(_TempDirTest):

    def test_reads_local_json(self):
        stations = load_stations(self.write("stations.json", json.dumps(STATIONS_DOC)))

        self.assertEqual(len(stations), 3)
        self.assertEqual(stations[0].short_name, "A32000")
        self.assertEqual(stations[0].name, "Fan Pier")
        self.assertAlmostEqual(stations[1].lon, -71.09)
        self.assertAlmostEqual(stations[1].lat, 42.36)
        self.assertIsNone(stations[2].lon)
        self.assertIsNone(stations[2].lat)
        self.assertEqual(stations[0].total_traffic, 0)

    def test_missing_file(self):
        with self.assertRaises(DatasetLoadError):
            load_stations(self.tmp / "nope.json")

    def test_bad_json(self):
        with self.assertRaises(DatasetLoadError):
            load_stations(self.write("bad.json", "{not json"))

    def test_missing_stations_array(self):
        with self.assertRaises(DatasetLoadError) as ctx:
            load_stations(self.write("empty.json", json.dumps({"data": {}})))
        self.assertIn("empty.json", ctx.exception.source)

    def test_stations_not_a_list(self):
        with self.assertRaises(DatasetLoadError):
            load_stations(self.write("odd.json", json.dumps({"data": {"stations": "x"}})))

    def test_station_row_not_an_object(self):
        doc = {"data": {"stations": [STATIONS_DOC["data"]["stations"][0], None]}}
        with self.assertRaises(DatasetLoadError) as ctx:
            load_stations(self.write("null_row.json", json.dumps(doc)))
        self.assertIn("stations[1]", str(ctx.exception))

    @patch("bikeflow.util.stations.urllib.request.urlopen")
    def test_reads_url(self, mock_urlopen):
        mock_response = MagicMock()
        mock_response.read.return_value = json.dumps(STATIONS_DOC).encode("utf-8")
        mock_urlopen.return_value.__enter__.return_value = mock_response

        stations = load_stations("https://example.org/stations.json")

        self.assertEqual(len(stations), 3)
        request = mock_urlopen.call_args[0][0]
        self.assertEqual(request.full_url, "https://example.org/stations.json")

    @patch("bikeflow.util.stations.urllib.request.urlopen")
    def test_http_error(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.HTTPError(
            "https://example.org/stations.json", 404, "Not Found", {}, io.BytesIO(b"")
        )
        with self.assertRaises(DatasetLoadError):
            load_stations("https://example.org/stations.json")

    def test_is_url(self):
        self.assertTrue(is_url("https://dsc106.com/x.json"))
        self.assertTrue(is_url("http://localhost/x.json"))
        self.assertFalse(is_url("data/x.json"))
        self.assertFalse(is_url(Path("x.json")))


class TestLoadTrips(_TempDirTest):

    def test_reads_csv_in_order(self):
        trips = load_trips(self.write("trips.csv", TRIPS_CSV), progress=False)

        self.assertEqual(len(trips), 3)
        self.assertEqual([t.start_station_id for t in trips], ["A32000", "M32006", "00042"])
        self.assertEqual(trips[0].end_station_id, "M32006")
        self.assertEqual(trips[0].started_at, datetime(2024, 3, 1, 8, 5))
        self.assertEqual(trips[0].ended_at, datetime(2024, 3, 1, 8, 25, 30))
        self.assertIsInstance(trips[2].ended_at, datetime)

    def test_ids_stay_strings(self):
        trips = load_trips(self.write("trips.csv", TRIPS_CSV), progress=False)
        self.assertEqual(trips[2].start_station_id, "00042")

    def test_missing_column(self):
        text = "start_station_id,end_station_id,started_at\nA,B,2024-03-01 08:00:00\n"
        with self.assertRaises(DatasetLoadError):
            load_trips(self.write("short.csv", text), progress=False)

    def test_missing_file(self):
        with self.assertRaises(DatasetLoadError):
            load_trips(self.tmp / "nope.csv", progress=False)

    def test_header_only(self):
        text = "start_station_id,end_station_id,started_at,ended_at\n"
        self.assertEqual(load_trips(self.write("none.csv", text), progress=False), [])


if __name__ == "__main__":
    unittest.main()
