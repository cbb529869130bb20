# bikeflow/config.py

# ============================================================
# DATASETS (Bluebikes, March 2024)
# ============================================================
DEFAULT_STATIONS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
DEFAULT_TRIPS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"

# ============================================================
# MAP
# ============================================================
# Boston / Cambridge
CENTER_LAT = 42.36027
CENTER_LON = -71.09415

ZOOM_START = 12
MIN_ZOOM = 5
MAX_ZOOM = 18

# ============================================================
# SERVER
# ============================================================
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
