"""Decide between approving and requesting changes.

An empty findings set is the only way to reach the approve branch, so a run
submits at most one review.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .annotations import Annotation, build_annotation, emit_annotation
from .context import PullRequestContext
from .errors import ContextError
from .findings import FindingsSet
from .github import APPROVE, REQUEST_CHANGES, submit_review
from .review_comments import ReviewComment, build_review_comment

SubmitFn = Callable[[PullRequestContext, str, str, Sequence[ReviewComment] | None], object]
EmitFn = Callable[[Annotation], None]


class Decision(enum.Enum):
    NO_ISSUES = "no_issues"
    ISSUES_FOUND = "issues_found"


@dataclass(frozen=True)
class ReviewOptions:
    auto_approve: bool = False
    auto_approve_message: str = ""
    auto_request_changes: bool = False
    auto_request_changes_message: str = ""


@dataclass
class Outcome:
    decision: Decision
    issues: int = 0
    files: int = 0
    annotations: list[Annotation] = field(default_factory=list)
    comments: list[ReviewComment] = field(default_factory=list)
    submitted: str | None = None


def summary_message(issues: int, files: int) -> str:
    return f"Found {issues} issue(s) in {files} file(s)."


def _require_context(context: PullRequestContext | None, action: str) -> PullRequestContext:
    if context is None:
        raise ContextError(f"{action} must run in a pull_request trigger")
    return context


def decide(
    findings: FindingsSet,
    options: ReviewOptions,
    context: PullRequestContext | None,
    *,
    submit: SubmitFn = submit_review,
    emit: EmitFn = emit_annotation,
) -> Outcome:
    """Annotate findings and submit the matching review.

    Raises:
        ContextError: a review is due but there is no pull request context.
        SubmissionError: the review could not be created.
    """
    if not findings:
        outcome = Outcome(decision=Decision.NO_ISSUES)
        if options.auto_approve:
            pr = _require_context(context, "auto-approve")
            submit(pr, APPROVE, options.auto_approve_message, None)
            outcome.submitted = APPROVE
        return outcome

    outcome = Outcome(decision=Decision.ISSUES_FOUND, files=len(findings))
    for path, reports in findings.items():
        for report in reports:
            outcome.issues += 1
            annotation = build_annotation(path, report)
            emit(annotation)
            outcome.annotations.append(annotation)
            outcome.comments.append(build_review_comment(path, report))

    if options.auto_request_changes:
        pr = _require_context(context, "auto-request-changes")
        body = options.auto_request_changes_message or summary_message(
            outcome.issues, outcome.files
        )
        submit(pr, REQUEST_CHANGES, body, outcome.comments)
        outcome.submitted = REQUEST_CHANGES
    return outcome
