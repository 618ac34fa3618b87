import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings", "DEFAULT_SEPARATOR", "DEFAULT_DEPTH"]

DEFAULT_SEPARATOR = ","
DEFAULT_DEPTH = 1

_ENV_PREFIX = "MAPITER_"


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> "Settings":
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get(f"{_ENV_PREFIX}LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level
        log_format = environ.get(f"{_ENV_PREFIX}LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)


settings = Settings.load()
