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
import re
from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from coreason_sessionlog.errors import RecordDecodeError
from coreason_sessionlog.levels import LogLevel

NANOS_PER_SECOND = 1_000_000_000

WIRE_KEYS = ("timestamp", "level", "source", "message", "data")

_RFC3339_PATTERN = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d{1,9}))?(?P<tz>Z|[+-]\d{2}:\d{2})$"
)


def format_timestamp(timestamp_ns: int) -> str:
    """
    Formats epoch nanoseconds as RFC3339 in UTC with all nine fractional digits.

    Example: 1700000000123456789 -> "2023-11-14T22:13:20.123456789Z"
    """
    seconds, nanos = divmod(timestamp_ns, NANOS_PER_SECOND)
    base = datetime.fromtimestamp(seconds, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    return f"{base}.{nanos:09d}Z"


def parse_timestamp(value: str) -> int:
    """
    Parses an RFC3339 timestamp (any offset, up to nanosecond precision) into epoch nanoseconds.
    """
    match = _RFC3339_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Invalid RFC3339 timestamp: {value!r}")

    tz = match.group("tz")
    offset = "+00:00" if tz == "Z" else tz
    dt = datetime.fromisoformat(match.group("base") + offset)
    frac = (match.group("frac") or "").ljust(9, "0")
    return int(dt.timestamp()) * NANOS_PER_SECOND + int(frac)


class LogRecord(BaseModel):
    """
    Canonical structured representation of one log event, prior to serialization.

    The timestamp is kept as integer nanoseconds so nothing is lost between
    capture and the RFC3339 wire form.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: int
    level: LogLevel
    source: str
    message: str
    data: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_timestamp(value)
        return value

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> LogLevel:
        return LogLevel.parse(value)

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value: Any) -> Any:
        # A null data field on the wire is read as "no fields".
        return {} if value is None else value

    def to_wire(self) -> Dict[str, Any]:
        """Returns the five-key mapping that is serialized on a JSON line."""
        return {
            "timestamp": format_timestamp(self.timestamp),
            "level": self.level.label,
            "source": self.source,
            "message": self.message,
            "data": dict(self.data),
        }

    def to_json(self) -> str:
        """
        Encodes the record as a single JSON line (without the trailing newline).

        Raises TypeError or ValueError if data holds values JSON cannot encode,
        NaN and infinities included; sinks are responsible for reporting that.
        """
        return json.dumps(self.to_wire(), ensure_ascii=False, allow_nan=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, line: str) -> "LogRecord":
        """Decodes a single JSON line produced by to_json."""
        try:
            payload = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordDecodeError(f"Invalid JSON in log line: {e}") from e

        if not isinstance(payload, dict):
            raise RecordDecodeError("Log line is not a JSON object")

        missing = [key for key in WIRE_KEYS if key not in payload]
        if missing:
            raise RecordDecodeError(f"Log line is missing keys: {', '.join(missing)}")

        try:
            return cls(**{key: payload[key] for key in WIRE_KEYS})
        except ValidationError as e:
            raise RecordDecodeError(f"Failed to parse log line: {e}") from e
