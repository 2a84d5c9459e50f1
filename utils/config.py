"""Environment-driven settings and logging setup."""

import logging
import os
from dataclasses import dataclass

from .constants import COEFFICIENT_EPSILON

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_number(name: str, default, parse):
    """Parse an env var, falling back to default with a warning on bad input."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return parse(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid %s, using %r", name, value, parse.__name__, default)
        return default


def is_valid_log_level(level: str) -> bool:
    return isinstance(logging.getLevelName(level), int)


@dataclass(frozen=True)
class Settings:
    max_workers: int
    parallel_channels: bool
    coeff_epsilon: float
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        log_level = os.getenv("IMAGO_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not is_valid_log_level(log_level):
            logger.warning("Ignoring IMAGO_LOG_LEVEL=%r, using %s", log_level, DEFAULT_LOG_LEVEL)
            log_level = DEFAULT_LOG_LEVEL
        return cls(
            max_workers=max(1, _env_number("IMAGO_MAX_WORKERS", os.cpu_count() or 1, int)),
            parallel_channels=_env_bool("IMAGO_PARALLEL_CHANNELS", True),
            coeff_epsilon=_env_number("IMAGO_COEFF_EPSILON", COEFFICIENT_EPSILON, float),
            log_level=log_level,
        )


SETTINGS = Settings.from_env()


def configure_logging(settings: Settings = SETTINGS) -> logging.Logger:
    if not is_valid_log_level(settings.log_level):
        raise ValueError(f"Unknown log level: {settings.log_level!r}")
    logging.basicConfig(level=settings.log_level)
    return logging.getLogger("imago")
