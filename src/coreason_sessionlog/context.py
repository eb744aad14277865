# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Generator, Mapping, Optional

from coreason_sessionlog.errors import LoggerNotBoundError
from coreason_sessionlog.logger import SessionLogger

_current: ContextVar[Optional[SessionLogger]] = ContextVar("coreason_sessionlog_current", default=None)

_MISSING: Any = object()


@contextmanager
def bind(logger: SessionLogger) -> Generator[SessionLogger, None, None]:
    """
    Binds `logger` to the current call chain for the duration of the block.

    Each thread and asyncio task sees its own binding.
    """
    token = _current.set(logger)
    try:
        yield logger
    finally:
        _current.reset(token)


def current_logger(default: Any = _MISSING) -> SessionLogger:
    """
    Returns the logger bound to the current call chain.

    Raises LoggerNotBoundError when nothing is bound and no default is given.
    """
    logger = _current.get()
    if logger is not None:
        return logger
    if default is _MISSING:
        raise LoggerNotBoundError("No logger is bound to the current call chain.")
    return default  # type: ignore[no-any-return]


@contextmanager
def session_scope(name: str, data: Optional[Mapping[str, Any]] = None) -> Generator[SessionLogger, None, None]:
    """Derives a session from the bound logger and binds it for the block."""
    child = current_logger().session(name, data)
    with bind(child):
        yield child
