# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

import threading
from typing import Iterable


class SessionCounter:
    """
    Allocates session segments for the direct children of one logger.

    Every logger created by `new` or `session` owns one of these; loggers derived
    with `with_data` share their parent's instance.
    """

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """The last segment handed out (0 if none yet)."""
        with self._lock:
            return self._value

    def next_segment(self) -> int:
        """Increments the counter and returns the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def __repr__(self) -> str:
        return f"SessionCounter(value={self.value})"


def next_segment(counter: SessionCounter) -> int:
    """Allocates the next child segment from `counter`."""
    return counter.next_segment()


def format_session_path(path: Iterable[int]) -> str:
    """Joins session segments with dots, e.g. (1, 1, 2) -> "1.1.2"."""
    return ".".join(str(segment) for segment in path)
