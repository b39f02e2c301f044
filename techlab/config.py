# techlab/config.py
"""
Runtime settings, read from the environment.

    TECHLAB_API_URL      base URL of the products API (default https://fakestoreapi.com)
    TECHLAB_API_TIMEOUT  request timeout in seconds (unset: wait indefinitely)
    TECHLAB_LOG_LEVEL    DEBUG, INFO, WARNING, ERROR or CRITICAL (default WARNING)
"""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from sdk.techlab import DEFAULT_BASE_URL

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_VARS = {
    "base_url": "TECHLAB_API_URL",
    "timeout": "TECHLAB_API_TIMEOUT",
    "log_level": "TECHLAB_LOG_LEVEL",
}


class Settings(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    log_level: str = "WARNING"

    @field_validator("base_url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base URL must not be empty")
        return v

    @field_validator("timeout", mode="before")
    @classmethod
    def empty_timeout(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("timeout")
    @classmethod
    def positive_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        if environ is None:
            environ = os.environ
        values = {field: environ[var] for field, var in ENV_VARS.items() if var in environ}
        return cls(**values)
