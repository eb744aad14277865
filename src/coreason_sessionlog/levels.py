# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

from enum import IntEnum
from typing import Union

from coreason_sessionlog.errors import InvalidLogLevelError


class LogLevel(IntEnum):
    """
    Ordered severity of a log record.

    Sinks compare against these values, so the numeric order is the filter order.
    """

    DEBUG = 0
    INFO = 1
    ERROR = 2
    FATAL = 3

    @property
    def label(self) -> str:
        """Lower-case name used on the wire."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union[str, int, "LogLevel"]) -> "LogLevel":
        """
        Resolves a level from a LogLevel, its integer value, or its name (any case).
        """
        if isinstance(value, LogLevel):
            return value

        if isinstance(value, bool):
            raise InvalidLogLevelError(f"Invalid log level: {value!r}")

        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidLogLevelError(f"Invalid log level: {value!r}") from e

        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]

        raise InvalidLogLevelError(f"Invalid log level: {value!r}")
