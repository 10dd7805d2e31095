"""GitHub pull request review submission through the gh CLI.

One call site creates either an APPROVE or a REQUEST_CHANGES review.
"""

from __future__ import annotations

import json
import os
import random
import subprocess
import tempfile
import time
from collections.abc import Sequence

from .context import PullRequestContext
from .errors import ReviewPermissionError, SubmissionError, TransientGitHubError
from .review_comments import ReviewComment
from .workflow import warn

APPROVE = "APPROVE"
REQUEST_CHANGES = "REQUEST_CHANGES"
REVIEW_EVENTS = (APPROVE, REQUEST_CHANGES)


def _is_transient_error(stderr: str) -> bool:
    """Check if error is a transient GitHub API error (5xx)."""
    transient_codes = ("502", "503", "504")
    lower_stderr = stderr.lower()
    # Handle both gh CLI format "(http 503)" and raw "HTTP 503" formats
    return any(
        f"(http {code})" in lower_stderr or f"http {code}" in lower_stderr
        for code in transient_codes
    )


def _run_gh(
    args: list[str],
    *,
    max_retries: int = 3,
    base_delay: float = 1.0,
) -> subprocess.CompletedProcess[str]:
    """Run a gh CLI command with retry logic for transient errors.

    Args:
        args: Arguments to pass to gh CLI
        max_retries: Maximum number of retry attempts for transient errors
        base_delay: Base delay in seconds between retries (uses exponential backoff)

    Returns:
        CompletedProcess result from the gh command

    Raises:
        ReviewPermissionError: Token lacks pull-requests: write permission
        TransientGitHubError: GitHub API returned 5xx after all retries
        subprocess.CalledProcessError: Any other gh CLI failure
    """
    for attempt in range(max_retries):
        result = subprocess.run(
            ["gh", *args], capture_output=True, text=True, check=False
        )

        if result.returncode == 0:
            return result

        stderr = (result.stderr or "").lower()

        if any(s in stderr for s in ("403", "resource not accessible", "insufficient")):
            raise ReviewPermissionError(
                "Unable to submit PR review: token lacks pull-requests: write permission.\n"
                "Add this to your workflow:\n"
                "permissions:\n"
                "  contents: read\n"
                "  pull-requests: write"
            )

        if _is_transient_error(result.stderr or ""):
            if attempt < max_retries - 1:
                # Exponential backoff with jitter: 1s, 2s, 4s + random jitter
                delay = base_delay * (2 ** attempt) + random.uniform(0, 0.5)
                warn(
                    f"GitHub API error (attempt {attempt + 1}/{max_retries}), "
                    f"retrying in {delay:.1f}s..."
                )
                time.sleep(delay)
                continue
            raise TransientGitHubError(
                f"GitHub API returned transient error after {max_retries} attempts: "
                f"{result.stderr}"
            )

        raise subprocess.CalledProcessError(
            result.returncode, result.args, result.stdout, result.stderr
        )

    # The loop must either return or raise.
    raise RuntimeError("_run_gh retry loop exited unexpectedly")


def build_review_payload(
    event: str,
    body: str,
    comments: Sequence[ReviewComment] | None = None,
) -> dict[str, object]:
    if event not in REVIEW_EVENTS:
        raise ValueError(f"unsupported review event: {event}")
    payload: dict[str, object] = {"event": event, "body": body}
    if event == REQUEST_CHANGES and comments:
        payload["comments"] = [c.to_payload() for c in comments]
    return payload


def submit_review(
    context: PullRequestContext,
    event: str,
    body: str,
    comments: Sequence[ReviewComment] | None = None,
) -> dict:
    """Create a pull request review.

    Raises:
        ReviewPermissionError: Token lacks pull-requests: write permission.
        TransientGitHubError: GitHub API returned 5xx after retries.
        SubmissionError: Any other gh CLI failure.
    """
    payload = build_review_payload(event, body, comments)

    with tempfile.NamedTemporaryFile("w", encoding="utf-8", suffix=".json", delete=False) as handle:
        json.dump(payload, handle)
        tmp_path = handle.name

    try:
        result = _run_gh(
            [
                "api",
                "-X",
                "POST",
                f"repos/{context.owner}/{context.repo}/pulls/{context.number}/reviews",
                "--input",
                tmp_path,
            ]
        )
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or str(exc)
        raise SubmissionError(f"{event} review failed: {detail}") from exc
    except OSError as exc:
        raise SubmissionError(f"unable to run gh: {exc}") from exc
    finally:
        os.unlink(tmp_path)

    try:
        data = json.loads(result.stdout or "{}")
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}
