"""
Configuration management for dicepool.

Loads settings from environment variables (and a .env file when present)
with defaults suitable for library use.
"""

import os
from pathlib import Path
from typing import Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

#: Largest count or side value the library parser accepts by default.
DEFAULT_MAX_VALUE = 255

_UNBOUNDED = ('none', 'unbounded')
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def parse_max_value(raw: Optional[str]) -> Optional[int]:
    """
    Interpret a max-value setting.

    ``None`` and the empty string yield the default bound; ``"none"`` or
    ``"unbounded"`` (any case) disable the bound.

    Raises:
        ValueError: If the value is not a non-negative integer
    """
    if raw is None:
        return DEFAULT_MAX_VALUE
    text = raw.strip().lower()
    if not text:
        return DEFAULT_MAX_VALUE
    if text in _UNBOUNDED:
        return None
    value = int(text)
    if value < 0:
        raise ValueError(f"max value must be non-negative, got {value}")
    return value


class Config:
    """
    Centralized configuration for dicepool.

    Example:
        config = Config()
        print(config.max_value)  # 255
        print(config.seed)       # None
    """

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            env_file: Optional path to .env file. If None, a .env file in the
                     current working directory is used when one exists.
        """
        if env_file:
            load_dotenv(env_file)
            logger.info(f"Loaded configuration from {env_file}")
        else:
            env_path = Path.cwd() / '.env'
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded configuration from {env_path}")
            else:
                logger.debug("No .env file found, using environment variables and defaults")

        self.errors = []

        # === Parser ===
        raw_max = os.getenv('DICEPOOL_MAX_VALUE')
        self.max_value_explicit = bool(raw_max and raw_max.strip())
        try:
            self.max_value = parse_max_value(raw_max)
        except ValueError:
            self.errors.append(f"Invalid DICEPOOL_MAX_VALUE: {raw_max!r}")
            self.max_value = DEFAULT_MAX_VALUE

        # === Randomness ===
        raw_seed = os.getenv('DICEPOOL_SEED', '').strip()
        self.seed: Optional[int] = None
        if raw_seed:
            try:
                self.seed = int(raw_seed)
            except ValueError:
                self.errors.append(f"Invalid DICEPOOL_SEED: {raw_seed!r}")

        # === Logging ===
        self.log_level = os.getenv('LOG_LEVEL', 'WARNING').upper()
        self.log_file = os.getenv('LOG_FILE') or None

    def validate(self) -> bool:
        """
        Log problems found while loading configuration.

        Returns:
            True if config is valid, False otherwise
        """
        valid = True

        for error in self.errors:
            logger.error(error)
            valid = False

        if self.log_level not in _LOG_LEVELS:
            logger.error(f"Invalid LOG_LEVEL: {self.log_level}. Must be one of {', '.join(_LOG_LEVELS)}")
            valid = False

        return valid

    def __repr__(self) -> str:
        return (
            f"Config("
            f"max_value={self.max_value}, "
            f"seed={self.seed}, "
            f"log_level={self.log_level})"
        )


# Global config instance (lazy-loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global config instance (singleton pattern).

    Example:
        from dicepool.core.config import get_config
        config = get_config()
        print(config.max_value)
    """
    global _config
    if _config is None:
        _config = Config()
        _config.validate()
    return _config


def reset_config() -> None:
    """Drop the cached global config so the next get_config() re-reads the environment."""
    global _config
    _config = None


__all__ = ['Config', 'DEFAULT_MAX_VALUE', 'get_config', 'parse_max_value', 'reset_config']
