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
import sys
from typing import Any, Optional

from loguru import logger as _logger

__all__ = ["COMPONENT", "DIAGNOSTICS_LEVEL_ENV", "configure_diagnostics", "logger"]

# Internal diagnostics only. Records produced by SessionLogger never go through loguru;
# this channel reports problems with the library itself (sink failures, bad payloads).
COMPONENT = "sessionlog"
DIAGNOSTICS_LEVEL_ENV = "SESSIONLOG_DIAGNOSTICS_LEVEL"
DEFAULT_DIAGNOSTICS_LEVEL = "WARNING"

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[component]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_handler_id: Optional[int] = None


def _is_diagnostic(record: Any) -> bool:
    return bool(record["extra"].get("component") == COMPONENT)


def configure_diagnostics(level: Optional[str] = None, sink: Any = None) -> int:
    """
    (Re)installs the diagnostics handler and returns its loguru handler id.

    The level defaults to SESSIONLOG_DIAGNOSTICS_LEVEL, then WARNING. Only
    messages emitted through this module's `logger` reach the handler.
    """
    global _handler_id
    if _handler_id is not None:
        _logger.remove(_handler_id)

    level = (level or os.environ.get(DIAGNOSTICS_LEVEL_ENV) or DEFAULT_DIAGNOSTICS_LEVEL).upper()
    _handler_id = _logger.add(sink or sys.stderr, level=level, format=_FORMAT, filter=_is_diagnostic)
    return _handler_id


_logger.remove()
configure_diagnostics()

logger: Any = _logger.bind(component=COMPONENT)
