"""Logging utilities for appwhere using Loguru.

Logging is disabled by default when appwhere is used as a library. Library users
can enable it with ``appwhere.enable_logging()``; the CLI enables it through settings.
"""

import sys
from typing import Literal, TextIO

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .constants import APP_NAME
from .models import AppInfo

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | [{extra[scope]}] {name}:{line} - {message} | {extra}\n{exception}"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=False)
    log_level: LogLevel = Field(default="INFO")


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig) -> int:
    """Send appwhere records to stderr for a CLI run."""
    logger.configure(extra={"scope": "cli", "env": app_info.environment})
    handler_id = _add_sink(sys.stderr, config.log_level, diagnose=(app_info.environment == "dev"))

    logger.debug(
        "CLI logging initialized",
        project=app_info.project_name,
        version=app_info.version,
        level=config.log_level,
    )

    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO", sink: TextIO | None = None) -> int:
    """Enable appwhere's records, written to ``sink`` (stderr by default)."""
    logger.configure(extra={"scope": "library"})
    return _add_sink(sink or sys.stderr, level)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _add_sink(sink: TextIO, level: str, diagnose: bool = False) -> int:
    logger.enable(APP_NAME)
    logger.remove()
    return logger.add(sink, level=level, format=TEXT_FORMAT, colorize=False, diagnose=diagnose)
