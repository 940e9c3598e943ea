"""Settings loaded from TASKTRACE_* environment variables."""

import logging
import math
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "TASKTRACE"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def is_log_level(name: str) -> bool:
    """True for names the logging module maps to a numeric level."""
    return isinstance(logging.getLevelName(name), int)


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if math.isfinite(value) and value >= 0 else default


def _env_level(env: Mapping[str, str], name: str, default: str) -> str:
    raw = (env.get(name) or "").strip().upper()
    return raw if raw and is_log_level(raw) else default


class Settings(BaseModel):
    """Runtime knobs for the console front end"""
    startup_delay: float = Field(ge=0, allow_inf_nan=False, default=0.5)   # Seconds before seeding
    seed: bool = True                                                      # Run the startup sequence
    log_level: str = DEFAULT_LOG_LEVEL                                     # Python logger level

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not is_log_level(value):
            raise ValueError(f"unknown log level: {value!r}")
        return value


def get_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from os.environ, or from the given mapping."""
    env = os.environ if environ is None else environ

    return Settings(
        startup_delay=_env_float(env, _k("STARTUP_DELAY"), 0.5),
        seed=_env_bool(env, _k("SEED"), True),
        log_level=_env_level(env, _k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
    )
