"""Typed loader for defaults/config.yml and action input parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

DEFAULTS_PATH = Path(__file__).resolve().parent.parent.parent / "defaults" / "config.yml"

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


@dataclass(frozen=True)
class LinterConfig:
    """How the linter is launched."""
    interpreter: str = "python"
    entrypoint: str = "main.py"
    output_format: str = "json"


@dataclass(frozen=True)
class ReviewConfig:
    """Default review messages."""
    approve_message: str = "No lint issues found."
    # Empty means a summary with issue and file counts is generated.
    request_changes_message: str = ""


@dataclass(frozen=True)
class DefaultsConfig:
    linter: LinterConfig = field(default_factory=LinterConfig)
    review: ReviewConfig = field(default_factory=ReviewConfig)


def _require_mapping(value: Any, ctx: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"{ctx}: expected mapping")
    return value


def _require_str(value: Any, ctx: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{ctx}: expected string")
    s = value.strip()
    if not s:
        raise ConfigError(f"{ctx}: must be non-empty")
    return s


def _optional_text(value: Any, ctx: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"{ctx}: expected string")
    return value.strip()


def _load_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text())
    except FileNotFoundError:
        raise ConfigError(f"missing config file: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e


def load_defaults_config(path: Path = DEFAULTS_PATH) -> DefaultsConfig:
    """Load defaults config."""
    raw = _load_yaml(path)
    if raw is None:
        return DefaultsConfig()
    cfg = _require_mapping(raw, "config")

    linter = LinterConfig()
    linter_raw = cfg.get("linter")
    if linter_raw is not None:
        linter_cfg = _require_mapping(linter_raw, "config.linter")
        linter = LinterConfig(
            interpreter=_require_str(
                linter_cfg.get("interpreter", linter.interpreter), "config.linter.interpreter"
            ),
            entrypoint=_require_str(
                linter_cfg.get("entrypoint", linter.entrypoint), "config.linter.entrypoint"
            ),
            output_format=_require_str(
                linter_cfg.get("format", linter.output_format), "config.linter.format"
            ),
        )

    review = ReviewConfig()
    review_raw = cfg.get("review")
    if review_raw is not None:
        review_cfg = _require_mapping(review_raw, "config.review")
        review = ReviewConfig(
            approve_message=_optional_text(
                review_cfg.get("approve_message"),
                "config.review.approve_message",
                review.approve_message,
            ),
            request_changes_message=_optional_text(
                review_cfg.get("request_changes_message"),
                "config.review.request_changes_message",
                review.request_changes_message,
            ),
        )

    return DefaultsConfig(linter=linter, review=review)


def parse_bool_input(value: str | None, name: str, *, default: bool = False) -> bool:
    """Parse a boolean action input (true/True/TRUE, false/False/FALSE)."""
    if value is None or value == "":
        return default
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"input {name!r} must be one of: true | True | TRUE | false | False | FALSE (got {value!r})"
    )
