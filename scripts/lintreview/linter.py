"""Run the external linter and capture its JSON output."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .config import LinterConfig
from .errors import ExecutionError


@dataclass(frozen=True)
class LinterResult:
    """Raw linter output. stdout stays undecoded until it is parsed."""
    args: list[str]
    returncode: int
    stdout: bytes
    stderr: str

    @property
    def stdout_text(self) -> str:
        """stdout for logging, with undecodable bytes replaced."""
        return self.stdout.decode("utf-8", errors="replace")


def split_files(value: str) -> list[str]:
    """Split the newline-delimited `files` input, dropping empty lines."""
    return [name for name in value.split("\n") if name]


def linter_command(config: LinterConfig, lint_path: str, files: Sequence[str]) -> list[str]:
    entrypoint = str(Path(lint_path) / config.entrypoint)
    return [config.interpreter, entrypoint, config.output_format, *files]


def run_linter(
    config: LinterConfig,
    lint_path: str,
    files: Sequence[str],
    *,
    cwd: str | None = None,
) -> LinterResult:
    """Run the linter to completion.

    A non-zero exit code is how the linter signals findings, so it is
    recorded but never raised.

    Raises:
        ExecutionError: the process could not be started.
    """
    args = linter_command(config, lint_path, files)
    try:
        result = subprocess.run(
            args, capture_output=True, check=False, cwd=cwd
        )
    except OSError as exc:
        raise ExecutionError(f"unable to launch linter {args[0]!r}: {exc}") from exc
    return LinterResult(
        args=args,
        returncode=result.returncode,
        stdout=result.stdout or b"",
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )
