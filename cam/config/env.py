from __future__ import annotations
import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ApiConfig:
    host: str = "0.0.0.0"
    port: int = 8000


def get_api_config() -> ApiConfig:
    return ApiConfig(
        host=os.getenv("CAM_API_HOST", "0.0.0.0"),
        port=int(os.getenv("CAM_API_PORT", "8000")),
    )


@dataclass(frozen=True)
class LogConfig:
    level: str = "INFO"


def get_log_config() -> LogConfig:
    return LogConfig(level=os.getenv("CAM_LOG_LEVEL", "INFO").upper())


def configure_logging() -> None:
    cfg = get_log_config()
    logging.basicConfig(
        level=getattr(logging, cfg.level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
