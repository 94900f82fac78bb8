"""Logging utilities for mlpwords."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

# Root handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class DecompositionStats:
    """Statistics from a decomposition run."""

    processed_count: int = 0
    error_count: int = 0
    edges_emitted: int = 0
    convexity_changes: int = 0
    quadrant_changes: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    contour_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_contour_time_ms(self) -> float | None:
        """Average time spent per contour, None before any contour finished."""
        if not self.contour_timings_ms:
            return None
        return sum(self.contour_timings_ms) / len(self.contour_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by a previous call are replaced.

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
        log_file = Path(f"mlpwords_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("mlpwords")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class DecompositionLogger:
    """Logger for tracking decomposition progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = DecompositionStats()

    def log_contour_start(self, name: str, length: int, ordering: str) -> None:
        """Log start of a contour decomposition."""
        self._logger.debug("Decomposing contour", contour=name, length=length, ordering=ordering)

    def log_contour_complete(
        self,
        name: str,
        edges: int,
        convexity_changes: int,
        quadrant_changes: int,
        duration_ms: float,
    ) -> None:
        """Log successful contour decomposition."""
        self._logger.info(
            "Contour decomposed",
            contour=name,
            edges=edges,
            convexity_changes=convexity_changes,
            quadrant_changes=quadrant_changes,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.edges_emitted += edges
        self._stats.convexity_changes += convexity_changes
        self._stats.quadrant_changes += quadrant_changes
        self._stats.contour_timings_ms.append(duration_ms)

    def log_contour_error(
        self,
        name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log contour decomposition error."""
        self._logger.error(
            "Contour decomposition failed",
            contour=name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((name, str(error)))

    @property
    def stats(self) -> DecompositionStats:
        """Get current decomposition statistics."""
        return self._stats
