"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import logging
import os

from src.infrastructure.logging.logger import get_app_logger


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class BookingTotalsSettings:
    """Runtime settings for the booking totals service.

    Attributes:
        log_level: Numeric logging level for the application logger.
        log_console: Whether log records are mirrored to the console.
    """

    log_level: int = logging.INFO
    log_console: bool = True

    @classmethod
    def from_env(cls) -> "BookingTotalsSettings":
        """Build settings from environment variables.

        Returns:
            BookingTotalsSettings: Settings sourced from environment variables.
        """
        raw_level = os.getenv("BOOKING_TOTALS_LOG_LEVEL", "INFO")
        raw_console = os.getenv("BOOKING_TOTALS_LOG_CONSOLE", "true")
        return cls(
            log_level=cls._parse_level(raw_level),
            log_console=raw_console.strip().lower() in _TRUE_VALUES,
        )

    @staticmethod
    def _parse_level(raw_level: str) -> int:
        """Resolve a level name, falling back to INFO when unknown.

        Args:
            raw_level: Level name such as ``DEBUG`` or ``warning``.

        Returns:
            int: Numeric logging level.
        """
        name = raw_level.strip().upper()
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
        get_app_logger().warning(
            f"Unknown log level {raw_level!r}, falling back to INFO"
        )
        return logging.INFO


__all__ = ["BookingTotalsSettings"]
