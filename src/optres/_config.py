"""Library configuration: Config dataclass, configure() and get_config()."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any

from optres._logging import configure_logging, get_logger

__all__ = [
    'LOG_LEVEL_ENV',
    'Config',
    'configure',
    'get_config',
]

LOG_LEVEL_ENV = 'OPTRES_LOG_LEVEL'

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

logger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Configuration for optres.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: If True, configured logging renders JSON instead of console output.
    """

    log_level: str | None = None
    json_logs: bool = False


# Process-wide configuration (set by configure())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from OPTRES_LOG_LEVEL, ignoring unknown values."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown %s value '%s', ignoring", LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def configure(config: Config | None = None, **overrides: Any) -> Config:
    """Set the process-wide configuration.

    Without a config, the log level comes from the OPTRES_LOG_LEVEL
    environment variable. Keyword overrides replace individual fields.
    When a log level ends up set, structured logging is configured.

    Args:
        config: Complete configuration to install.
        **overrides: Field values applied on top of config.

    Returns:
        The installed Config.

    Raises:
        ValueError: If an explicit log_level is not a known level name.

    Example:
        ```python
        import optres

        optres.configure(log_level='DEBUG', json_logs=True)
        ```
    """
    global _config

    if config is None:
        config = Config(log_level=_detect_log_level())
    if overrides:
        config = dataclasses.replace(config, **overrides)

    if config.log_level is not None:
        level = config.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log_level '{config.log_level}', expected one of {', '.join(_LOG_LEVELS)}")
        config = dataclasses.replace(config, log_level=level)
        configure_logging(config.log_level, json_output=config.json_logs)

    _config = config
    logger.debug('optres_configured', log_level=config.log_level, json_logs=config.json_logs)
    return config


def get_config() -> Config:
    """Return the current configuration, reading the environment on first use."""
    if _config is None:
        return configure()
    return _config
