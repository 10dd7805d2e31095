"""Pull request context for the triggering workflow event.

Resolved once at the start of a run and passed to whatever needs it.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError


@dataclass(frozen=True)
class PullRequestContext:
    owner: str
    repo: str
    number: int

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def split_repo(value: str) -> tuple[str, str]:
    """Split `owner/repo`."""
    owner, sep, name = value.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ConfigError(f"repository must be in owner/repo format: {value!r}")
    return owner, name


def _pull_number_from_event(event: object) -> int | None:
    if not isinstance(event, dict):
        return None
    pull_request = event.get("pull_request")
    pr_number = pull_request.get("number") if isinstance(pull_request, dict) else None
    for number in (pr_number, event.get("number")):
        if isinstance(number, int) and not isinstance(number, bool):
            return number
    return None


def read_event(path: str | None) -> dict:
    """Read the workflow event payload, or {} when there is none."""
    if not path:
        return {}
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"unable to read event payload {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in event payload {path}: {exc}") from exc
    return data if isinstance(data, dict) else {}


def resolve_pull_request_context(
    env: Mapping[str, str],
    *,
    repo: str | None = None,
    pr_number: int | None = None,
) -> PullRequestContext | None:
    """Build the context from overrides or GITHUB_REPOSITORY / GITHUB_EVENT_PATH.

    Returns None when the run was not triggered by a pull request.
    """
    full_name = (repo or env.get("GITHUB_REPOSITORY") or "").strip()
    number = pr_number
    if number is None:
        number = _pull_number_from_event(read_event(env.get("GITHUB_EVENT_PATH")))
    if number is None or not full_name:
        return None
    owner, name = split_repo(full_name)
    return PullRequestContext(owner=owner, repo=name, number=number)
