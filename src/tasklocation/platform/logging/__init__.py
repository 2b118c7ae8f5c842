"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper and Rich handler.
Why: Provide a single canonical import path for application logging.
"""

from __future__ import annotations

from .config import LOGGER_NAME, default_log_file, logger, setup_logger
from .handlers import LocationRichHandler

__all__ = [
    "LOGGER_NAME",
    "LocationRichHandler",
    "default_log_file",
    "logger",
    "setup_logger",
]
