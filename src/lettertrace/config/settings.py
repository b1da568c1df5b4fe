"""Configuration settings for Lettertrace."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GridConfig(BaseModel):
    """Configuration for the per-stroke coverage grid.

    The grid is overlaid on the full 0-100 letter square. Each touch sample
    stamps every valid cell within ``touch_radius`` cells of the touched
    cell, so coarse grids with a wide radius are very forgiving.
    """

    resolution: int = Field(
        default=12,
        ge=2,
        le=100,
        description="Cells per side of the coverage grid",
    )
    touch_radius: float = Field(
        default=8.0,
        ge=0.0,
        le=100.0,
        description="Radius, in cells, activated around each touch sample",
    )

    @property
    def cell_size(self) -> float:
        """Side length of one cell in normalized units."""
        return 100.0 / self.resolution


class ZoneConfig(BaseModel):
    """Authoring-time settings for building stroke zones."""

    stroke_width: float = Field(
        default=25.0,
        gt=0.0,
        le=100.0,
        description="Total width of a stroke's touch band in normalized units",
    )
    arc_samples: int = Field(
        default=8,
        ge=2,
        le=256,
        description="Angular steps per arc when building curved zones",
    )


class SessionConfig(BaseModel):
    """Configuration for choosing the letter of a session."""

    seed: int | None = Field(
        default=None,
        description="Seed for deterministic letter selection (None = random)",
    )
    letter: str | None = Field(
        default=None,
        min_length=1,
        max_length=1,
        description="Fixed letter to trace (None = pick from catalog)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        """Upper-case a level name and reject names logging does not know."""
        level = value.upper()
        if level not in LOG_LEVELS:
            expected = ", ".join(LOG_LEVELS)
            raise ValueError(f"unknown log level '{value}', expected one of {expected}")
        return level


class TracingSettings(BaseModel):
    """Main application settings."""

    grid: GridConfig = Field(default_factory=GridConfig)
    zone: ZoneConfig = Field(default_factory=ZoneConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TracingSettings:
    """Get default application settings."""
    return TracingSettings()
