"""Shared utility functions.

This subpackage provides helpers used across the application with no
dependencies on other subpackages.

Key modules:
    - paths: Path containment checks and display labels
    - logging: Logging configuration and credential masking
"""

from .paths import ensure_within, display_path
from .logging import configure_logging, get_logger

__all__ = [
    # paths
    "ensure_within",
    "display_path",
    # logging
    "configure_logging",
    "get_logger",
]
