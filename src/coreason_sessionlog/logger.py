# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

import os
import threading
from typing import Any, Dict, List, Mapping, Optional, Tuple

from coreason_sessionlog.formatter import format_record, merge_data
from coreason_sessionlog.interfaces import Sink
from coreason_sessionlog.levels import LogLevel
from coreason_sessionlog.schemas import LogRecord
from coreason_sessionlog.session import SessionCounter, format_session_path, next_segment
from coreason_sessionlog.utils.logger import logger as diagnostics

DEFAULT_FATAL_EXIT_CODE = 1


class SinkRegistry:
    """
    Append-only list of sinks shared by every logger of one lineage.
    """

    def __init__(self, fatal_exit_code: int = DEFAULT_FATAL_EXIT_CODE) -> None:
        self._sinks: List[Sink] = []
        self._lock = threading.Lock()
        self.fatal_exit_code = fatal_exit_code

    def register(self, sink: Sink) -> None:
        with self._lock:
            self._sinks.append(sink)

    def snapshot(self) -> Tuple[Sink, ...]:
        with self._lock:
            return tuple(self._sinks)

    def dispatch(self, record: LogRecord) -> None:
        """
        Hands the record to every sink. A failing sink is reported on the
        diagnostics channel and does not stop the others.
        """
        for sink in self.snapshot():
            try:
                sink.log(record)
            except Exception as e:
                diagnostics.error(f"Sink {type(sink).__name__} failed to write '{record.message}': {e}")

    def flush(self) -> None:
        for sink in self.snapshot():
            flush = getattr(sink, "flush", None)
            if not callable(flush):
                continue
            try:
                flush()
            except Exception as e:
                diagnostics.error(f"Sink {type(sink).__name__} failed to flush: {e}")


class SessionLogger:
    """
    Immutable, cheaply derivable logger.

    A logger carries its lineage name, the names and numbers of the sessions it
    was derived through, and accumulated data. Sinks are registered once on any
    logger of a lineage and are seen by all of them.

    Loggers are meant to be passed down call chains and derived per call
    (`session`), not stored on long-lived objects.
    """

    __slots__ = ("_name", "_name_path", "_session_path", "_data", "_sinks", "_counter")

    def __init__(
        self,
        name: str,
        *,
        name_path: Tuple[str, ...] = (),
        session_path: Tuple[int, ...] = (),
        data: Optional[Mapping[str, Any]] = None,
        sinks: Optional[SinkRegistry] = None,
        counter: Optional[SessionCounter] = None,
    ) -> None:
        self._name = name
        self._name_path = tuple(name_path)
        self._session_path = tuple(session_path)
        self._data: Dict[str, Any] = dict(data or {})
        self._sinks = sinks if sinks is not None else SinkRegistry()
        self._counter = counter if counter is not None else SessionCounter()

    @property
    def name(self) -> str:
        """Name of the lineage root; used as the record source."""
        return self._name

    @property
    def name_path(self) -> Tuple[str, ...]:
        return self._name_path

    @property
    def session_path(self) -> Tuple[int, ...]:
        return self._session_path

    @property
    def session_id(self) -> str:
        """Dotted session path, or "" for a root logger."""
        return format_session_path(self._session_path)

    @property
    def data(self) -> Dict[str, Any]:
        return dict(self._data)

    @property
    def sinks(self) -> Tuple[Sink, ...]:
        return self._sinks.snapshot()

    @property
    def counter(self) -> SessionCounter:
        return self._counter

    def register_sink(self, sink: Sink) -> None:
        """Adds a sink to the lineage; every related logger sees it immediately."""
        self._sinks.register(sink)

    def session(self, name: str, data: Optional[Mapping[str, Any]] = None) -> "SessionLogger":
        """
        Derives a child logger with the next session number from this logger's counter.

        The child owns a fresh counter for its own children.
        """
        segment = next_segment(self._counter)
        return SessionLogger(
            self._name,
            name_path=(*self._name_path, name),
            session_path=(*self._session_path, segment),
            data=merge_data(self._data, data),
            sinks=self._sinks,
            counter=SessionCounter(),
        )

    def with_data(self, data: Mapping[str, Any]) -> "SessionLogger":
        """
        Derives a logger with extra data and nothing else changed.

        The result shares this logger's counter, so sessions derived from either
        one are numbered from the same sequence.
        """
        return SessionLogger(
            self._name,
            name_path=self._name_path,
            session_path=self._session_path,
            data=merge_data(self._data, data),
            sinks=self._sinks,
            counter=self._counter,
        )

    def log(
        self,
        level: LogLevel,
        message: str,
        error: Optional[BaseException] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Formats a record at `level` and dispatches it to every registered sink."""
        record = format_record(self, LogLevel.parse(level), message, error=error, data=data)
        self._sinks.dispatch(record)

    def debug(
        self, message: str, error: Optional[BaseException] = None, data: Optional[Mapping[str, Any]] = None
    ) -> None:
        self.log(LogLevel.DEBUG, message, error=error, data=data)

    def info(
        self, message: str, error: Optional[BaseException] = None, data: Optional[Mapping[str, Any]] = None
    ) -> None:
        self.log(LogLevel.INFO, message, error=error, data=data)

    def error(
        self, message: str, error: Optional[BaseException] = None, data: Optional[Mapping[str, Any]] = None
    ) -> None:
        self.log(LogLevel.ERROR, message, error=error, data=data)

    def fatal(
        self, message: str, error: Optional[BaseException] = None, data: Optional[Mapping[str, Any]] = None
    ) -> None:
        """
        Logs at fatal level, flushes every sink, then terminates the process.

        Termination uses os._exit so it cannot be intercepted by exception
        handlers in the calling code.
        """
        self.log(LogLevel.FATAL, message, error=error, data=data)
        self._sinks.flush()
        os._exit(self._sinks.fatal_exit_code)

    def __repr__(self) -> str:
        return f"SessionLogger(name={self._name!r}, session={self.session_id!r}, data={self._data!r})"


def new(name: str, fatal_exit_code: int = DEFAULT_FATAL_EXIT_CODE) -> SessionLogger:
    """Creates the root logger of a new lineage, with no sinks."""
    if fatal_exit_code == 0:
        raise ValueError("fatal_exit_code must be non-zero")
    return SessionLogger(name, sinks=SinkRegistry(fatal_exit_code=fatal_exit_code))
