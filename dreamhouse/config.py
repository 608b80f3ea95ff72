"""
Central configuration for the Dreamhouse backend.

Loads environment variables and defines the geometry constants shared by
the layout, roof and room generators.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_RELOAD = os.getenv("API_RELOAD", "false").lower() in ("1", "true", "yes")

CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

DEFAULT_STYLE = os.getenv("DEFAULT_STYLE", "Modern")

# ---------------------------------------------------------------------------
# Roofs (feet)
# ---------------------------------------------------------------------------
DEFAULT_EAVES_OVERHANG = 1.5
FLAT_ROOF_THICKNESS = 0.75
PARAPET_HEIGHT = 2.5
PARAPET_THICKNESS = 0.5

# ---------------------------------------------------------------------------
# Footprint derivation
# ---------------------------------------------------------------------------
# area per story = lot_size / LOT_COVERAGE / stories
# depth runs FOOTPRINT_ASPECT times the width
LOT_COVERAGE = 1.5
FOOTPRINT_ASPECT = 1.5

# ---------------------------------------------------------------------------
# Windows
# ---------------------------------------------------------------------------
WALL_HEIGHT_FOR_WINDOWS = 9.0   # ft of wall used for window area targets
SQFT_PER_WINDOW = 12.0
MIN_WINDOWS_PER_ROOM = 1
MAX_WINDOWS_PER_ROOM = 5

# ---------------------------------------------------------------------------
# Foundations: slab depth below grade (ft) and margin beyond the walls
# ---------------------------------------------------------------------------
FOUNDATION_DEPTHS: dict[str, float] = {
    "slab": 1.0,
    "crawlspace": 3.0,
    "basement": 8.0,
}
FOUNDATION_MARGIN = 0.5
