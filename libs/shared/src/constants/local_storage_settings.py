"""Local Storage Settings

Two independent keys: calculator inputs and the saved prediction list.
"""

import os

# Directory holding one JSON file per key, override with WANGGE_DATA_DIR
LOCAL_STORAGE_DIR: str = os.environ.get("WANGGE_DATA_DIR", "data/local_storage")

GRID_SETTINGS_KEY = "wangge-grid-settings"
PREDICTIONS_KEY = "wangge-predictions"
