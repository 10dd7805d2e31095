"""Turn linter JSON findings into GitHub pull request reviews."""

from .errors import (
    ConfigError,
    ContextError,
    ExecutionError,
    LintReviewError,
    MalformedOutputError,
    ReviewPermissionError,
    SubmissionError,
    TransientGitHubError,
)
from .findings import Diagnostic, Indicator, LineReport, column_range, parse_findings
from .outcome import Decision, Outcome, ReviewOptions, decide

__all__ = [
    "ConfigError",
    "ContextError",
    "Decision",
    "Diagnostic",
    "ExecutionError",
    "Indicator",
    "LineReport",
    "LintReviewError",
    "MalformedOutputError",
    "Outcome",
    "ReviewOptions",
    "ReviewPermissionError",
    "SubmissionError",
    "TransientGitHubError",
    "column_range",
    "decide",
    "parse_findings",
]
