"""Inline review comments for linter diagnostics."""

from __future__ import annotations

from dataclasses import dataclass

from .findings import LineReport

# Comments anchor to the new version of the line.
SIDE = "RIGHT"


@dataclass(frozen=True)
class ReviewComment:
    path: str
    line: int
    body: str
    side: str = SIDE

    def to_payload(self) -> dict[str, object]:
        return {"path": self.path, "line": self.line, "side": self.side, "body": self.body}


def render_comment_body(error: str, suggestion: str | None) -> str:
    """Render the comment body.

    A non-empty suggestion is appended as a ```suggestion block, which GitHub
    renders as a one-click replacement for the commented line.
    """
    if not suggestion:
        return error
    return f"{error}\n```suggestion\n{suggestion}\n```"


def build_review_comment(path: str, report: LineReport) -> ReviewComment:
    diagnostic = report.diagnostic
    return ReviewComment(
        path=path,
        line=report.line_number,
        body=render_comment_body(diagnostic.error, diagnostic.suggestion),
    )
