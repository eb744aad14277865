# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sessionlog

import sys
from pathlib import Path
from typing import Annotated, Iterable, Optional

import typer

from coreason_sessionlog import __version__
from coreason_sessionlog.errors import InvalidLogLevelError, RecordDecodeError
from coreason_sessionlog.levels import LogLevel
from coreason_sessionlog.schemas import LogRecord
from coreason_sessionlog.sinks import render_pretty
from coreason_sessionlog.utils.logger import logger

app = typer.Typer(
    name="coreason-sessionlog",
    help="CLI for coreason-sessionlog: session-correlated structured logging.",
    add_completion=False,
)


def prettify_lines(lines: Iterable[str], min_level: LogLevel = LogLevel.DEBUG) -> Iterable[str]:
    """
    Converts JSON log lines to readable lines.

    Lines that are not log records are passed through untouched; records below
    `min_level` are dropped.
    """
    for raw in lines:
        line = raw.rstrip("\n")
        if not line.strip():
            continue
        try:
            record = LogRecord.from_json(line)
        except RecordDecodeError:
            yield line
            continue
        if record.level >= min_level:
            yield render_pretty(record)


@app.command()
def pretty(
    file: Annotated[Optional[Path], typer.Argument(help="JSON log file (defaults to stdin)", exists=True)] = None,
    min_level: Annotated[str, typer.Option("--min-level", "-l", help="Lowest level to show")] = "debug",
) -> None:
    """
    Render JSON log lines as human-readable text.
    """
    try:
        level = LogLevel.parse(min_level)
    except InvalidLogLevelError as e:
        logger.error(str(e))
        sys.exit(2)

    try:
        if file is None:
            for out in prettify_lines(sys.stdin, level):
                typer.echo(out)
        else:
            with open(file, "r", encoding="utf-8") as f:
                for out in prettify_lines(f, level):
                    typer.echo(out)
    except Exception:
        logger.exception("Failed to render log lines")
        sys.exit(1)


@app.command()
def levels() -> None:
    """Print the severity names, lowest first."""
    for level in LogLevel:
        typer.echo(level.label)


@app.command()
def version() -> None:
    """Print the version of coreason-sessionlog."""
    typer.echo(f"coreason-sessionlog v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
