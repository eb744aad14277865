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
import sys

import pytest
from pydantic import ValidationError

from coreason_sessionlog.config import Settings, from_settings
from coreason_sessionlog.levels import LogLevel
from coreason_sessionlog.sinks import PrettySink, WriterSink


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("SESSIONLOG_LEVEL", "SESSIONLOG_FORMAT", "SESSIONLOG_STREAM", "SESSIONLOG_FATAL_EXIT_CODE"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings()
    assert settings.level is LogLevel.INFO
    assert settings.format == "json"
    assert settings.stream == "stdout"
    assert settings.fatal_exit_code == 1


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SESSIONLOG_LEVEL", "debug")
    monkeypatch.setenv("SESSIONLOG_FORMAT", "pretty")
    monkeypatch.setenv("SESSIONLOG_STREAM", "stderr")
    monkeypatch.setenv("SESSIONLOG_FATAL_EXIT_CODE", "70")

    settings = Settings()
    assert settings.level is LogLevel.DEBUG
    assert settings.format == "pretty"
    assert settings.stream == "stderr"
    assert settings.fatal_exit_code == 70


def test_invalid_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SESSIONLOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()


def test_zero_exit_code_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(fatal_exit_code=0)


def test_from_settings_json(capsys: pytest.CaptureFixture[str]) -> None:
    root = from_settings("svc", Settings(level="info", format="json", stream="stdout"))

    (sink,) = root.sinks
    assert isinstance(sink, WriterSink)
    assert sink.minimum_level is LogLevel.INFO
    assert sink.destination is sys.stdout

    root.debug("hidden")
    root.info("shown")
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert json.loads(out[0])["message"] == "shown"


def test_from_settings_pretty_stderr() -> None:
    root = from_settings("svc", Settings(format="pretty", stream="stderr", level="error"))
    (sink,) = root.sinks
    assert isinstance(sink, PrettySink)
    assert sink.destination is sys.stderr
    assert sink.minimum_level is LogLevel.ERROR
