# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

from typing import Protocol, runtime_checkable

from coreason_sessionlog.levels import LogLevel
from coreason_sessionlog.schemas import LogRecord


@runtime_checkable
class Sink(Protocol):
    """
    Protocol for log record destinations.
    """

    minimum_level: LogLevel

    def log(self, record: LogRecord) -> None:
        """
        Writes the record if its level is at or above minimum_level.
        """
        ...
