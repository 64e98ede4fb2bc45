from __future__ import annotations

import logging
import os
from typing import List, Literal, Mapping, Optional

from pydantic import BaseModel

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ENV_PREFIX = "LIFTCALL_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerSettings(BaseModel):
    """Runtime settings for the HTTP adapter."""

    title: str = "LiftCall Elevator API"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: LogLevel = "INFO"
    cors_origins: List[str] = ["*"]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        environ = os.environ if environ is None else environ
        values: dict = {}
        for field in ("host", "port", "log_level"):
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw:
                values[field] = raw.upper() if field == "log_level" else raw
        origins = environ.get(ENV_PREFIX + "CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        return cls(**values)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
