"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from networth_engine.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class EngineSettings:
    """Runtime settings for the net worth engine.

    Attributes:
        max_workers: Thread pool size for concurrent data source reads.
        history_months: Default history window for trend analysis, where
            zero or a negative value means all history.
        snapshot_delay_seconds: Pause between owners in the monthly job.
    """

    max_workers: int = 5
    history_months: int = 12
    snapshot_delay_seconds: float = 0.1

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from environment variables.

        Returns:
            EngineSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        defaults = cls()
        max_workers = cls._read_int(
            "NETWORTH_MAX_WORKERS",
            defaults.max_workers,
            logger,
        )
        if max_workers < 1:
            logger.warning(
                f"NETWORTH_MAX_WORKERS must be positive, got {max_workers}"
            )
            max_workers = defaults.max_workers
        return cls(
            max_workers=max_workers,
            history_months=cls._read_int(
                "NETWORTH_HISTORY_MONTHS",
                defaults.history_months,
                logger,
            ),
            snapshot_delay_seconds=cls._read_float(
                "NETWORTH_SNAPSHOT_DELAY_SECONDS",
                defaults.snapshot_delay_seconds,
                logger,
            ),
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: {raw!r}")
            return default

    @staticmethod
    def _read_float(name: str, default: float, logger) -> float:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw.strip())
        except ValueError:
            logger.warning(f"Invalid number for {name}: {raw!r}")
            return default
        return max(value, 0.0)


__all__ = ["EngineSettings"]
