"""Logging utilities for SwipeCrop."""

import logging
import threading
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from swipecrop.domain import Rect, Size
from swipecrop.exceptions import FailureKind


@dataclass
class CropStats:
    """Statistics from one or more pipeline runs."""

    completed_count: int = 0
    failed_count: int = 0
    failures: Counter = field(default_factory=Counter)
    crop_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def total_count(self) -> int:
        return self.completed_count + self.failed_count

    @property
    def avg_crop_time_ms(self) -> float | None:
        """Average time per successful crop in milliseconds."""
        if not self.crop_timings_ms:
            return None
        return sum(self.crop_timings_ms) / len(self.crop_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
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

    logger = structlog.get_logger("swipecrop")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def _rect_fields(rect: Rect) -> list[float]:
    return [round(v, 2) for v in rect.to_tuple()]


class CropLogger:
    """Logger for tracking crop outcomes and statistics.

    Safe to share between threads; stat updates are serialized.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CropStats()
        self._lock = threading.Lock()

    def log_crop_start(self, image_bytes: int, path_points: int) -> None:
        """Log start of a pipeline run."""
        self._logger.debug(
            "Crop started",
            image_bytes=image_bytes,
            path_points=path_points,
        )

    def log_geometry(self, screen_rect: Rect, image_rect: Rect, image_size: Size) -> None:
        """Log the display-space and image-space rectangles of a crop."""
        self._logger.debug(
            "Crop region resolved",
            screen_rect=_rect_fields(screen_rect),
            image_rect=_rect_fields(image_rect),
            image_size=[int(image_size.width), int(image_size.height)],
        )

    def log_crop_complete(
        self,
        width: int,
        height: int,
        format: str,
        duration_ms: float,
    ) -> None:
        """Log a successful crop."""
        self._logger.info(
            "Crop complete",
            width=width,
            height=height,
            format=format,
            duration_ms=round(duration_ms, 2),
        )
        with self._lock:
            self._stats.completed_count += 1
            self._stats.crop_timings_ms.append(duration_ms)

    def log_crop_failed(self, kind: FailureKind, message: str) -> None:
        """Log a terminal pipeline failure."""
        self._logger.warning(
            "Crop failed",
            kind=kind.value,
            reason=message,
        )
        with self._lock:
            self._stats.failed_count += 1
            self._stats.failures[kind] += 1

    @property
    def stats(self) -> CropStats:
        """Get current crop statistics."""
        return self._stats
