"""Error taxonomy for a lint-review run.

Every error aborts the run; the entry script reports the message once.
"""

from __future__ import annotations


class LintReviewError(Exception):
    """Base class for run-terminating failures."""


class ConfigError(LintReviewError):
    """Invalid action input or defaults file."""


class ExecutionError(LintReviewError):
    """The linter process could not be launched."""


class MalformedOutputError(LintReviewError):
    """Linter stdout is not the expected JSON document."""


class ContextError(LintReviewError):
    """A review was requested outside a pull_request trigger."""


class SubmissionError(LintReviewError):
    """Creating the pull request review failed."""


class ReviewPermissionError(SubmissionError):
    """Token lacks pull-requests: write permission."""


class TransientGitHubError(SubmissionError):
    """GitHub API returned a transient error (5xx)."""
