"""Configuration management for lettertrace.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GridConfig: Coverage grid resolution and touch radius
- ZoneConfig: Zone authoring settings (stroke width, arc sampling)
- SessionConfig: Letter selection settings
- LoggingConfig: Logging settings
- TracingSettings: Main application settings
"""

from lettertrace.config.settings import (
    GridConfig,
    LoggingConfig,
    SessionConfig,
    TracingSettings,
    ZoneConfig,
    get_default_settings,
)

__all__ = [
    "GridConfig",
    "LoggingConfig",
    "SessionConfig",
    "TracingSettings",
    "ZoneConfig",
    "get_default_settings",
]
