"""Workflow annotations for linter diagnostics.

Each diagnostic becomes one `::error` annotation anchored to its line. They
are display-only markers, printed as soon as they are built.
"""

from __future__ import annotations

from dataclasses import dataclass

from .findings import LineReport, column_range
from .workflow import format_command

ANNOTATION_TITLE = "Lint Review"


@dataclass(frozen=True)
class Annotation:
    title: str
    file: str
    start_line: int
    end_line: int
    message: str
    start_column: int | None = None
    end_column: int | None = None

    def properties(self) -> dict[str, object]:
        return {
            "title": self.title,
            "file": self.file,
            "line": self.start_line,
            "endLine": self.end_line,
            "col": self.start_column,
            "endColumn": self.end_column,
        }


def build_annotation(path: str, report: LineReport) -> Annotation:
    start_column, end_column = column_range(report.diagnostic.indicators)
    return Annotation(
        title=ANNOTATION_TITLE,
        file=path,
        start_line=report.line_number,
        end_line=report.line_number,
        message=report.diagnostic.error,
        start_column=start_column,
        end_column=end_column,
    )


def emit_annotation(annotation: Annotation) -> None:
    """Print the annotation as an `::error` workflow command."""
    print(format_command("error", annotation.message, annotation.properties()), flush=True)
