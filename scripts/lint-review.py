#!/usr/bin/env python3
"""Run the linter on the given files and review the pull request.

Approves when the linter reports nothing, otherwise annotates every finding
and optionally requests changes with inline comments.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from lintreview.config import DEFAULTS_PATH, load_defaults_config, parse_bool_input
from lintreview.context import resolve_pull_request_context
from lintreview.errors import LintReviewError
from lintreview.findings import parse_findings
from lintreview.linter import run_linter, split_files
from lintreview.outcome import Decision, ReviewOptions, decide
from lintreview.workflow import fail, group, info, notice, warn


def _env_input(name: str) -> str | None:
    """Read an action input the way the runner exports it (INPUT_<NAME>)."""
    return os.environ.get(f"INPUT_{name.upper()}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Review a pull request from linter JSON findings.")
    p.add_argument("--lint-path", default=_env_input("lint-path") or "", help="Directory containing the linter")
    p.add_argument("--files", default=_env_input("files") or "", help="Newline-delimited list of files to lint")
    p.add_argument("--auto-approve", default=_env_input("auto-approve"), help="true/false")
    p.add_argument("--auto-approve-message", default=_env_input("auto-approve-message"))
    p.add_argument("--auto-request-changes", default=_env_input("auto-request-changes"), help="true/false")
    p.add_argument("--auto-request-changes-message", default=_env_input("auto-request-changes-message"))
    p.add_argument("--repo", default=None, help="owner/repo (default: env GITHUB_REPOSITORY)")
    p.add_argument("--pr", type=int, default=None, help="PR number (default: from GITHUB_EVENT_PATH)")
    p.add_argument("--config", default=str(DEFAULTS_PATH), help="Path to defaults config YAML")
    p.add_argument("--cwd", default=None, help="Working directory for the linter")
    return p


def run(args: argparse.Namespace) -> Decision:
    defaults = load_defaults_config(Path(args.config))

    approve_message = args.auto_approve_message
    if approve_message is None or not approve_message.strip():
        approve_message = defaults.review.approve_message
    request_changes_message = args.auto_request_changes_message
    if request_changes_message is None:
        request_changes_message = defaults.review.request_changes_message

    options = ReviewOptions(
        auto_approve=parse_bool_input(args.auto_approve, "auto-approve"),
        auto_approve_message=approve_message,
        auto_request_changes=parse_bool_input(args.auto_request_changes, "auto-request-changes"),
        auto_request_changes_message=request_changes_message.strip(),
    )
    context = None
    if options.auto_approve or options.auto_request_changes:
        context = resolve_pull_request_context(os.environ, repo=args.repo, pr_number=args.pr)

    files = split_files(args.files)
    result = run_linter(defaults.linter, args.lint_path, files, cwd=args.cwd)
    with group("Linter output"):
        info(result.stdout_text)
    info(f"Linter exited with code {result.returncode}")
    if result.stderr.strip():
        warn(f"Linter stderr: {result.stderr.strip()}")

    findings = parse_findings(result.stdout)
    outcome = decide(findings, options, context)

    if outcome.decision is Decision.NO_ISSUES:
        notice("No lint issues found.")
    else:
        notice(f"Found {outcome.issues} lint issue(s) in {outcome.files} file(s).")
    if outcome.submitted:
        notice(f"Submitted {outcome.submitted} review on {context.full_name}#{context.number}.")
    return outcome.decision


def main(argv: list[str] | None = None) -> None:
    """Main."""
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except LintReviewError as exc:
        fail(str(exc))


if __name__ == "__main__":
    main()
