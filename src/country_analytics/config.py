from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Project paths
# ---------------------------------------------------------------------------

# Root of the project (repo root)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Data directory (sample dataset lives here)
DATA_DIR = PROJECT_ROOT / "data"

# ---------------------------------------------------------------------------
# App identity
# ---------------------------------------------------------------------------

APP_NAME = "Country Analytics Explorer"
APP_VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Data source configuration
#
# The countries dataset is a JSON array of country objects. It is read once
# per process, either from a local file or from an HTTP(S) endpoint:
#   - COUNTRIES_DATA_URL wins when set
#   - otherwise COUNTRIES_DATA_PATH is used (defaults to data/countries.json)
# ---------------------------------------------------------------------------

COUNTRIES_DATA_PATH = Path(
    os.getenv("COUNTRIES_DATA_PATH", str(DATA_DIR / "countries.json")).strip()
)

COUNTRIES_DATA_URL = os.getenv("COUNTRIES_DATA_URL", "").strip()

# Timeout for a single HTTP request when the source is a URL
HTTP_TIMEOUT_SECONDS = int(os.getenv("COUNTRIES_HTTP_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("COUNTRIES_LOG_LEVEL", "INFO").strip().upper()
