"""Linter findings model and JSON parsing.

The linter prints one JSON object: file path -> list of line records.

    {"a.py": [{"lnr": 3, "line": "x = 1", "result": {
        "exit_rule": 1,
        "indicators": [{"start": 2, "end": 5}],
        "error": "bad",
        "suggestion": "good"}}]}

An empty object means no issues.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .errors import MalformedOutputError


@dataclass(frozen=True)
class Indicator:
    """Column span highlighting part of a line."""
    start: int
    end: int


@dataclass(frozen=True)
class Diagnostic:
    """One issue reported by a lint rule."""
    exit_rule: int
    indicators: tuple[Indicator, ...]
    error: str
    suggestion: str | None = None


@dataclass(frozen=True)
class LineReport:
    """A diagnostic together with the line it was found on."""
    line_number: int
    line_text: str
    diagnostic: Diagnostic


FindingsSet = dict[str, list[LineReport]]


def column_range(indicators: Iterable[Indicator]) -> tuple[int | None, int | None]:
    """Collapse indicators into one (start, end) span.

    This is a min/max fold, not a union: disjoint spans are reported as the
    single span covering all of them. No indicators means no column
    information, so both bounds are None.
    """
    start: int | None = None
    end: int | None = None
    for indicator in indicators:
        if start is None or indicator.start < start:
            start = indicator.start
        if end is None or indicator.end > end:
            end = indicator.end
    return start, end


def _require_mapping(value: Any, ctx: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedOutputError(f"{ctx}: expected object")
    return value


def _require_list(value: Any, ctx: str) -> list[Any]:
    if not isinstance(value, list):
        raise MalformedOutputError(f"{ctx}: expected array")
    return value


def _require_int(value: Any, ctx: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedOutputError(f"{ctx}: expected integer")
    return value


def _require_str(value: Any, ctx: str) -> str:
    if not isinstance(value, str):
        raise MalformedOutputError(f"{ctx}: expected string")
    return value


def _optional_str(value: Any, ctx: str) -> str | None:
    if value is None:
        return None
    return _require_str(value, ctx)


def _parse_indicator(raw: Any, ctx: str) -> Indicator:
    item = _require_mapping(raw, ctx)
    return Indicator(
        start=_require_int(item.get("start"), f"{ctx}.start"),
        end=_require_int(item.get("end"), f"{ctx}.end"),
    )


def _parse_diagnostic(raw: Any, ctx: str) -> Diagnostic:
    result = _require_mapping(raw, ctx)
    indicators_raw = _require_list(result.get("indicators"), f"{ctx}.indicators")
    return Diagnostic(
        exit_rule=_require_int(result.get("exit_rule"), f"{ctx}.exit_rule"),
        indicators=tuple(
            _parse_indicator(item, f"{ctx}.indicators[{idx}]")
            for idx, item in enumerate(indicators_raw)
        ),
        error=_require_str(result.get("error"), f"{ctx}.error"),
        suggestion=_optional_str(result.get("suggestion"), f"{ctx}.suggestion"),
    )


def _parse_line_report(raw: Any, ctx: str) -> LineReport:
    record = _require_mapping(raw, ctx)
    return LineReport(
        line_number=_require_int(record.get("lnr"), f"{ctx}.lnr"),
        line_text=_require_str(record.get("line"), f"{ctx}.line"),
        diagnostic=_parse_diagnostic(record.get("result"), f"{ctx}.result"),
    )


def parse_findings(text: str | bytes) -> FindingsSet:
    """Parse linter stdout into file path -> line reports.

    Raw bytes must be UTF-8.

    Raises:
        MalformedOutputError: not JSON, or not shaped like linter findings.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedOutputError(f"linter output is not valid UTF-8: {exc}") from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedOutputError(f"linter output is not valid JSON: {exc}") from exc

    files = _require_mapping(raw, "findings")
    findings: FindingsSet = {}
    for path, records in files.items():
        ctx = f"findings[{path!r}]"
        findings[path] = [
            _parse_line_report(record, f"{ctx}[{idx}]")
            for idx, record in enumerate(_require_list(records, ctx))
        ]
    return findings
