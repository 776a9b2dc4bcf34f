"""Configuration management for columndiff."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back on unparsable values."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


class Settings(BaseModel):
    """Library settings."""

    model_config = ConfigDict(validate_default=True)

    # Confidence attached to positions found by header comparison
    header_confidence: float = _env_float("COLUMNDIFF_HEADER_CONFIDENCE", 1.0)

    # Confidence attached to positional guesses (trailing columns)
    fallback_confidence: float = _env_float("COLUMNDIFF_FALLBACK_CONFIDENCE", 0.5)

    # Below this, renderers mark a change as estimated
    high_confidence_threshold: float = _env_float(
        "COLUMNDIFF_HIGH_CONFIDENCE_THRESHOLD", 0.85
    )

    # Default for header comparison when the caller passes no header options
    ignore_case: bool = _env_flag("COLUMNDIFF_IGNORE_CASE")

    # Logging
    log_level: str = os.getenv("COLUMNDIFF_LOG_LEVEL", "WARNING").upper()
    debug: bool = _env_flag("COLUMNDIFF_DEBUG")

    @field_validator(
        "header_confidence", "fallback_confidence", "high_confidence_threshold"
    )
    @classmethod
    def clamp_unit_interval(cls, value: float) -> float:
        """Keep confidences inside [0, 1]."""
        return min(1.0, max(0.0, value))

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        """Fall back to WARNING for unknown level names."""
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            return "WARNING"
        return value


settings = Settings()
