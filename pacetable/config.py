"""
Configuration constants for PaceTable
Centralized settings for the color pool, storage keys, and pace defaults
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# =============================================================================
# ATHLETE COLORS
# =============================================================================

# Colors assigned to athletes, in allocation order
COLOR_POOL = [
    "#03A9F4",
    "#F44336",
    "#9C27B0",
    "#607D8B",
    "#E91E63",
    "#3F51B5",
    "#795548",
    "#009688",
    "#00BCD4",
    "#4CAF50",
]

# =============================================================================
# STORAGE
# =============================================================================

DEFAULT_DATA_DIR = "data"
DEFAULT_STORAGE_FILE = "storage.json"

# Keys in the key/value storage
COLOR_USAGE_KEY = "colorUsage"
CUSTOM_DISTANCES_KEY = "customDistances"
MIN_PACE_KEY = "minPace"
MAX_PACE_KEY = "maxPace"
INCREMENT_KEY = "increment"
SHOW_VMA_KEY = "showVMA"
VMA_KEY = "vma"

# =============================================================================
# PACE TABLE DEFAULTS
# =============================================================================

DEFAULT_MIN_PACE = 360  # 6'00"/km
DEFAULT_MAX_PACE = 120  # 2'00"/km
DEFAULT_INCREMENT = 1   # 1 second per km
DEFAULT_VMA = 16        # 16 km/h

# Reference distances in metres (always shown, cannot be removed)
DEFAULT_DISTANCES = [100, 200, 400, 800, 1000, 1500, 1609, 3000, 5000, 10000, 21097, 42195]

# Largest distance a user may add (metres)
MAX_CUSTOM_DISTANCE = 100000


def get_data_dir() -> str:
    """Directory holding the JSON storage file"""
    return os.getenv("PACETABLE_DATA_DIR") or DEFAULT_DATA_DIR


def get_storage_file() -> str:
    """Name of the JSON storage file inside the data directory"""
    return os.getenv("PACETABLE_STORAGE_FILE") or DEFAULT_STORAGE_FILE


def is_diagnostic_mode() -> bool:
    """Verbose console diagnostics for storage and color allocation"""
    return os.getenv("DIAGNOSTIC_MODE", "false").strip().lower() in ("true", "1", "yes")
