"""Path and environment helpers for project directories."""

from __future__ import annotations

import os
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("FLOWSCRIPT_DATA_DIR") or ROOT_DIR / "data")
RUNS_DIR = DATA_DIR / "runs"


def persist_runs_default() -> bool:
    return os.getenv("FLOWSCRIPT_PERSIST_RUNS", "true").lower() in ("true", "1", "yes")
