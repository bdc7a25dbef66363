# src/mancala_search/io/settings.py
import os
from typing import Dict

# ---------------------------------------------------------------------
# Config (environment, read once at import)
# ---------------------------------------------------------------------
START_STONES     = int(os.getenv("MANCALA_START_STONES", "4"))
TOP_N            = int(os.getenv("MANCALA_TOP_N", "10"))
MAX_START_STONES = int(os.getenv("MANCALA_MAX_START_STONES", "5"))
MAX_PICKUPS      = int(os.getenv("MANCALA_MAX_PICKUPS", "10000"))

# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def current_settings() -> Dict[str, int]:
    return {
        "start_stones": START_STONES,
        "top_n": TOP_N,
        "max_start_stones": MAX_START_STONES,
        "max_pickups": MAX_PICKUPS,
    }
