"""Utility functions for lettertrace.

This module provides utility functions including:

- Logging setup and configuration
- Session progress and statistics logging
"""

from lettertrace.utils.logging import (
    SessionLogger,
    SessionStats,
    configure_console_logging,
    configure_logging,
)

__all__ = [
    "SessionLogger",
    "SessionStats",
    "configure_console_logging",
    "configure_logging",
]
