# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

"""
coreason-sessionlog
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import Settings, from_settings
from .context import bind, current_logger, session_scope
from .errors import InvalidLogLevelError, LoggerNotBoundError, RecordDecodeError, SessionLogError
from .formatter import format_record
from .interfaces import Sink
from .levels import LogLevel
from .logger import SessionLogger, new
from .schemas import LogRecord
from .session import SessionCounter, next_segment
from .sinks import InMemorySink, PrettySink, ReconfigurableSink, WriterSink

__all__ = [
    "new",
    "SessionLogger",
    "SessionCounter",
    "next_segment",
    "format_record",
    "LogRecord",
    "LogLevel",
    "Sink",
    "WriterSink",
    "PrettySink",
    "InMemorySink",
    "ReconfigurableSink",
    "bind",
    "current_logger",
    "session_scope",
    "Settings",
    "from_settings",
    "SessionLogError",
    "InvalidLogLevelError",
    "LoggerNotBoundError",
    "RecordDecodeError",
]
