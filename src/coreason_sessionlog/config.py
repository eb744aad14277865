# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

import sys
from typing import Any, Literal, Optional, TextIO

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coreason_sessionlog.levels import LogLevel
from coreason_sessionlog.logger import SessionLogger, new
from coreason_sessionlog.sinks import PrettySink, WriterSink


class Settings(BaseSettings):
    """
    Environment-driven defaults for building a root logger.

    SESSIONLOG_LEVEL, SESSIONLOG_FORMAT, SESSIONLOG_STREAM, SESSIONLOG_FATAL_EXIT_CODE
    """

    model_config = SettingsConfigDict(env_prefix="SESSIONLOG_", extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: Literal["json", "pretty"] = "json"
    stream: Literal["stdout", "stderr"] = "stdout"
    fatal_exit_code: int = 1

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LogLevel:
        return LogLevel.parse(value)

    @field_validator("fatal_exit_code")
    @classmethod
    def _non_zero_exit(cls, value: int) -> int:
        if value == 0:
            raise ValueError("fatal_exit_code must be non-zero")
        return value


def _resolve_stream(name: str) -> TextIO:
    return sys.stderr if name == "stderr" else sys.stdout


def from_settings(name: str, settings: Optional[Settings] = None) -> SessionLogger:
    """
    Creates a root logger with one sink configured from `settings` (or the environment).
    """
    settings = settings or Settings()
    root = new(name, fatal_exit_code=settings.fatal_exit_code)

    sink_cls = PrettySink if settings.format == "pretty" else WriterSink
    root.register_sink(sink_cls(_resolve_stream(settings.stream), settings.level))
    return root
