"""Logging utilities for Lettertrace."""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class SessionStats:
    """Statistics from one tracing session."""

    samples_received: int = 0
    samples_accepted: int = 0
    samples_ignored: int = 0
    strokes_completed: int = 0
    resets: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate time from session start to letter completion."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"lettertrace_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("lettertrace")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


def configure_console_logging(level: str = "WARNING") -> None:
    """Configure structlog to print events at or above a level to the console.

    Used when no log file is requested, so routine session events stay
    out of the command output.

    Args:
        level: Minimum level to print
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        cache_logger_on_first_use=False,
    )


class SessionLogger:
    """Logger for tracking tracing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("lettertrace")
        self._stats = SessionStats()

    def log_session_start(self, letter: str, stroke_count: int) -> None:
        """Log start of a tracing session."""
        self._stats.start_time = time.time()
        self._stats.end_time = None
        self._logger.info("Session started", letter=letter, strokes=stroke_count)

    def log_sample(self, accepted: bool) -> None:
        """Count one touch sample."""
        self._stats.samples_received += 1
        if accepted:
            self._stats.samples_accepted += 1
        else:
            self._stats.samples_ignored += 1

    def log_stroke_complete(
        self,
        letter: str,
        stroke_index: int,
        stroke_id: str,
        coverage: float,
    ) -> None:
        """Log a stroke reaching its threshold."""
        self._logger.debug(
            "Stroke complete",
            letter=letter,
            stroke_index=stroke_index,
            stroke=stroke_id,
            coverage=round(coverage, 3),
        )
        self._stats.strokes_completed += 1

    def log_letter_complete(self, letter: str) -> None:
        """Log completion of the whole letter."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Letter complete",
            letter=letter,
            samples=self._stats.samples_received,
            accepted=self._stats.samples_accepted,
            duration_s=round(self._stats.duration_seconds, 2),
        )

    def log_reset(self, letter: str) -> None:
        """Log an explicit session reset."""
        self._logger.debug("Session reset", letter=letter)
        self._stats.resets += 1
        self._stats.start_time = time.time()
        self._stats.end_time = None

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._stats
