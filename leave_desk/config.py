"""Configuration defaults for the leave desk service."""

import os
from pathlib import Path


DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class DefaultConfig:
    # Directory holding employees.json and leaves.json
    DATA_DIR = os.getenv("LEAVE_DESK_DATA_DIR", str(DEFAULT_DATA_DIR))
    SECRET_KEY = os.getenv("LEAVE_DESK_SECRET_KEY", "leave-desk-secret")


__all__ = ["DEFAULT_DATA_DIR", "DefaultConfig"]
