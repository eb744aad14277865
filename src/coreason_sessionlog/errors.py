# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog


class SessionLogError(Exception):
    """Base class for all coreason-sessionlog errors."""


class InvalidLogLevelError(SessionLogError, ValueError):
    """Raised when a severity name or value is not part of LogLevel."""


class LoggerNotBoundError(SessionLogError, LookupError):
    """Raised when no logger is bound to the current call chain."""


class RecordDecodeError(SessionLogError, ValueError):
    """Raised when a JSON line cannot be decoded into a LogRecord."""
