"""Logging configuration for the mars_rover package."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once; level falls back to MARS_ROVER_LOG_LEVEL, then WARNING."""
    level = (level or os.getenv("MARS_ROVER_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level, logging.WARNING))

    # Silence werkzeug request lines unless explicitly asked for
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
