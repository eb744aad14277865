# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

import time
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

from coreason_sessionlog.levels import LogLevel
from coreason_sessionlog.schemas import LogRecord
from coreason_sessionlog.session import format_session_path
from coreason_sessionlog.utils.logger import logger as diagnostics

if TYPE_CHECKING:
    from coreason_sessionlog.logger import SessionLogger

SESSION_KEY = "session"
ERROR_KEY = "error"

Clock = Callable[[], int]


def build_message(name_path: tuple[str, ...], message: str) -> str:
    """
    Prefixes the message with the session names, root excluded.

    ("obj-a", "obj-b"), "do-it" -> "obj-a.obj-b.do-it"; (), "do-it" -> "do-it".
    """
    return ".".join((*name_path, message))


def merge_data(*layers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Flattens mappings left to right; later layers win on key collision.

    Layers that are not mappings are reported on the diagnostics channel and skipped.
    """
    merged: Dict[str, Any] = {}
    for layer in layers:
        if layer is None:
            continue
        if not isinstance(layer, Mapping):
            diagnostics.warning(f"Ignoring log data of type {type(layer).__name__}: expected a mapping")
            continue
        merged.update(layer)
    return merged


def describe_error(error: BaseException) -> str:
    """Text for the error field; the type name when the exception has no message."""
    try:
        text = str(error)
    except Exception:
        text = ""
    return text or type(error).__name__


def format_record(
    logger: "SessionLogger",
    level: LogLevel,
    message: str,
    error: Optional[BaseException] = None,
    data: Optional[Mapping[str, Any]] = None,
    clock: Clock = time.time_ns,
) -> LogRecord:
    """
    Builds the record for one logging call from the logger's current state.

    Data precedence, lowest first: accumulated logger data, the session id,
    the call's own data, the error description.
    """
    session_layer = {SESSION_KEY: format_session_path(logger.session_path)} if logger.session_path else None
    error_layer = {ERROR_KEY: describe_error(error)} if error is not None else None

    # model_construct skips validation: data is carried as-is and only checked when a sink encodes it.
    return LogRecord.model_construct(
        timestamp=clock(),
        level=level,
        source=logger.name,
        message=build_message(logger.name_path, message),
        data=merge_data(logger.data, session_layer, data, error_layer),
    )
