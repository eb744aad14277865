# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

import json
import threading
from typing import Any, Dict, List, TextIO, Union

from coreason_sessionlog.interfaces import Sink
from coreason_sessionlog.levels import LogLevel
from coreason_sessionlog.schemas import LogRecord, format_timestamp
from coreason_sessionlog.utils.logger import logger

LevelLike = Union[LogLevel, str, int]


def encode_record(record: LogRecord) -> str:
    """
    Encodes a record as a JSON line, falling back to a placeholder payload when
    its data cannot be encoded.
    """
    try:
        return record.to_json()
    except (TypeError, ValueError) as e:
        logger.warning(f"Log data for '{record.message}' is not JSON serializable: {e}")
        fallback = record.model_copy(update={"data": {"serialization_error": str(e), "data_dump": repr(record.data)}})
        return fallback.to_json()


class _StreamSink:
    """
    Shared machinery for sinks writing whole lines to a text stream.

    The write and the flush happen under one lock so lines from concurrent
    callers never interleave.
    """

    def __init__(self, destination: TextIO, minimum_level: LevelLike = LogLevel.DEBUG) -> None:
        self.destination = destination
        self.minimum_level = LogLevel.parse(minimum_level)
        self._lock = threading.Lock()

    def render(self, record: LogRecord) -> str:
        raise NotImplementedError

    def log(self, record: LogRecord) -> None:
        if record.level < self.minimum_level:
            return

        line = self.render(record) + "\n"
        with self._lock:
            self.destination.write(line)
            self.destination.flush()

    def flush(self) -> None:
        with self._lock:
            self.destination.flush()


class WriterSink(_StreamSink):
    """
    Machine-readable sink: one JSON object per line with exactly the keys
    timestamp, level, source, message and data.
    """

    def render(self, record: LogRecord) -> str:
        return encode_record(record)


class PrettySink(_StreamSink):
    """
    Human-oriented sink.

    Example line:
        2025-01-01T00:00:00.000000000Z INFO  svc obj-a.do-it session="1" user="bob"
    """

    def render(self, record: LogRecord) -> str:
        return render_pretty(record)


def render_pretty(record: LogRecord) -> str:
    """Renders a record as a single readable line."""
    parts = [
        format_timestamp(record.timestamp),
        f"{record.level.label.upper():<5}",
        record.source,
        record.message,
    ]
    for key, value in record.data.items():
        try:
            rendered = json.dumps(value, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError):
            rendered = repr(value)
        parts.append(f"{key}={rendered}")
    return " ".join(parts)


class InMemorySink:
    """
    Sink that keeps every accepted record as an encoded JSON line.

    Used to assert on logging from calling code without a real stream.
    """

    def __init__(self, minimum_level: LevelLike = LogLevel.DEBUG) -> None:
        self.minimum_level = LogLevel.parse(minimum_level)
        self._lines: List[str] = []
        self._lock = threading.Lock()

    def log(self, record: LogRecord) -> None:
        if record.level < self.minimum_level:
            return

        line = encode_record(record)
        with self._lock:
            self._lines.append(line)

    def lines(self) -> List[str]:
        with self._lock:
            return list(self._lines)

    def records(self) -> List[LogRecord]:
        """Decodes the buffered lines back into records."""
        return [LogRecord.from_json(line) for line in self.lines()]

    def messages(self) -> List[str]:
        return [record.message for record in self.records()]

    def levels(self) -> List[LogLevel]:
        return [record.level for record in self.records()]

    def payloads(self) -> List[Dict[str, Any]]:
        return [record.data for record in self.records()]

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)


class ReconfigurableSink:
    """
    Wraps another sink with a threshold that can be changed at runtime.

    The wrapped sink's own threshold still applies after this one.
    """

    def __init__(self, sink: Sink, minimum_level: LevelLike = LogLevel.INFO) -> None:
        self.sink = sink
        self._minimum_level = LogLevel.parse(minimum_level)
        self._lock = threading.Lock()

    @property
    def minimum_level(self) -> LogLevel:
        with self._lock:
            return self._minimum_level

    def set_minimum_level(self, level: LevelLike) -> None:
        parsed = LogLevel.parse(level)
        with self._lock:
            self._minimum_level = parsed

    def log(self, record: LogRecord) -> None:
        if record.level < self.minimum_level:
            return
        self.sink.log(record)

    def flush(self) -> None:
        flush = getattr(self.sink, "flush", None)
        if callable(flush):
            flush()
