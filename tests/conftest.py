# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

import io
from typing import Any, Callable, Generator, List

import pytest
from loguru import logger

from coreason_sessionlog.levels import LogLevel
from coreason_sessionlog.logger import SessionLogger, new
from coreason_sessionlog.schemas import LogRecord
from coreason_sessionlog.sinks import InMemorySink

# 2023-11-14T22:13:20.123456789Z
FIXED_NS = 1_700_000_000_123_456_789


# --- Mocks ---


class FailingSink:
    """Sink whose destination is broken."""

    def __init__(self, minimum_level: LogLevel = LogLevel.DEBUG) -> None:
        self.minimum_level = minimum_level
        self.calls = 0

    def log(self, record: LogRecord) -> None:
        self.calls += 1
        raise OSError("destination closed")


class Unserializable:
    def __repr__(self) -> str:
        return "<Unserializable>"


# --- Fixtures ---


@pytest.fixture
def fixed_ns() -> int:
    return FIXED_NS


@pytest.fixture
def fixed_clock() -> Callable[[], int]:
    """Clock that always reads FIXED_NS."""
    return lambda: FIXED_NS


@pytest.fixture
def make_record() -> Callable[..., LogRecord]:
    """
    Factory for records from source "svc" stamped at FIXED_NS.
    Keyword arguments become the record data.
    """

    def _make(level: LogLevel = LogLevel.INFO, message: str = "obj-a.do-it", **data: Any) -> LogRecord:
        return LogRecord(timestamp=FIXED_NS, level=level, source="svc", message=message, data=data)

    return _make


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()


@pytest.fixture
def unserializable() -> Unserializable:
    return Unserializable()


@pytest.fixture
def memory_sink() -> InMemorySink:
    return InMemorySink()


@pytest.fixture
def root(memory_sink: InMemorySink) -> SessionLogger:
    """Root logger 'svc' with an in-memory sink accepting every level."""
    logger_ = new("svc")
    logger_.register_sink(memory_sink)
    return logger_


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def diagnostics() -> Generator[List[str], None, None]:
    """Captures messages sent to the internal loguru diagnostics channel."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(str(m)), level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)
