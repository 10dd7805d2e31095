"""GitHub Actions workflow command helpers.

Log lines and annotations are plain prints of `::command::` strings that the
runner picks up from the step output.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import NoReturn


def escape_data(value: object) -> str:
    """Escape a workflow command message."""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: object) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(
    command: str,
    message: object = "",
    properties: Mapping[str, object] | None = None,
) -> str:
    """Format `::command key=value,...::message`, skipping None properties."""
    props = ",".join(
        f"{key}={escape_property(value)}"
        for key, value in (properties or {}).items()
        if value is not None
    )
    head = f"::{command} {props}" if props else f"::{command}"
    return f"{head}::{escape_data(message)}"


def info(message: str) -> None:
    """Info."""
    print(message, flush=True)


def notice(message: str) -> None:
    """Notice."""
    print(format_command("notice", message), file=sys.stderr)


def warn(message: str) -> None:
    """Warn."""
    print(format_command("warning", message), file=sys.stderr)


def fail(message: str, code: int = 1) -> NoReturn:
    """Report the run's single failure message and exit."""
    print(format_command("error", message), file=sys.stderr)
    sys.exit(code)


@contextmanager
def group(title: str) -> Iterator[None]:
    """Fold the enclosed log lines under a collapsible title."""
    print(f"::group::{escape_data(title)}", flush=True)
    try:
        yield
    finally:
        print("::endgroup::", flush=True)
