from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "vehicles.json"


def catalog_path() -> Path:
    path = os.getenv("DEALERSHIP_CATALOG_PATH")

    if not path:
        return DEFAULT_CATALOG_PATH

    return Path(path)


def log_level() -> str:
    return os.getenv("DEALERSHIP_LOG_LEVEL", "INFO").upper()
