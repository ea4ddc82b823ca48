"""
Environment configuration for the holiday resolver.
Uses .env for local overrides.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file (only relevant in development)
load_dotenv()

DEFAULT_COUNTRY = "kr"


def default_country() -> str:
    """Country used when a custom holiday is set without one."""
    return os.getenv("HOLIDAY_DEFAULT_COUNTRY", DEFAULT_COUNTRY).lower()


def data_dir() -> Optional[Path]:
    """Alternate directory with per-country rule datasets, if configured."""
    value = os.getenv("HOLIDAY_DATA_DIR")
    return Path(value) if value else None


def holidays_url() -> Optional[str]:
    """Base URL of the pre-computed holiday lists."""
    value = os.getenv("HOLIDAYS_URL")
    return value.rstrip("/") if value else None
