# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

import coreason_sessionlog


def test_public_api_exposure() -> None:
    """
    Verify that the logging surface is exposed at the package level.
    """
    expected_symbols = [
        "new",
        "SessionLogger",
        "LogRecord",
        "LogLevel",
        "Sink",
        "WriterSink",
        "PrettySink",
        "InMemorySink",
        "ReconfigurableSink",
        "next_segment",
        "format_record",
        "bind",
        "current_logger",
        "session_scope",
        "from_settings",
    ]

    for symbol in expected_symbols:
        assert hasattr(coreason_sessionlog, symbol), f"{symbol} not exposed in coreason_sessionlog"


def test_all_is_consistent() -> None:
    for symbol in coreason_sessionlog.__all__:
        assert hasattr(coreason_sessionlog, symbol)


def test_end_to_end_through_package_namespace() -> None:
    root = coreason_sessionlog.new("svc")
    sink = coreason_sessionlog.InMemorySink()
    root.register_sink(sink)

    root.session("obj-a").session("obj-b").debug("do-it-b")

    (record,) = sink.records()
    assert record.message == "obj-a.obj-b.do-it-b"
    assert record.data == {"session": "1.1"}


def test_version_exposure() -> None:
    """Verify version is exposed."""
    assert hasattr(coreason_sessionlog, "__version__")
    assert isinstance(coreason_sessionlog.__version__, str)
