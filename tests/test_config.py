"""Tests for lintreview.config."""

from pathlib import Path

import pytest

from lintreview.config import (
    DEFAULTS_PATH,
    ConfigError,
    DefaultsConfig,
    LinterConfig,
    ReviewConfig,
    load_defaults_config,
    parse_bool_input,
)


def write_config(tmp_path: Path, content: str) -> Path:
    p = tmp_path / "config.yml"
    p.write_text(content)
    return p


class TestLoadDefaultsConfig:
    def test_repository_defaults_load(self):
        cfg = load_defaults_config(DEFAULTS_PATH)
        assert cfg.linter == LinterConfig(interpreter="python", entrypoint="main.py", output_format="json")
        assert cfg.review.request_changes_message == ""

    def test_empty_file_uses_defaults(self, tmp_path):
        assert load_defaults_config(write_config(tmp_path, "")) == DefaultsConfig()

    def test_partial_sections(self, tmp_path):
        path = write_config(tmp_path, """
linter:
  interpreter: python3
review:
  approve_message: "  Ship it  "
""")
        cfg = load_defaults_config(path)
        assert cfg.linter.interpreter == "python3"
        assert cfg.linter.entrypoint == "main.py"
        assert cfg.review == ReviewConfig(approve_message="Ship it", request_changes_message="")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="missing config file"):
            load_defaults_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_defaults_config(write_config(tmp_path, "linter: [unclosed"))

    def test_top_level_must_be_mapping(self, tmp_path):
        with pytest.raises(ConfigError, match="config: expected mapping"):
            load_defaults_config(write_config(tmp_path, "- a\n- b\n"))

    def test_blank_interpreter_rejected(self, tmp_path):
        with pytest.raises(ConfigError, match="config.linter.interpreter: must be non-empty"):
            load_defaults_config(write_config(tmp_path, "linter:\n  interpreter: '  '\n"))

    def test_message_must_be_string(self, tmp_path):
        with pytest.raises(ConfigError, match="config.review.approve_message: expected string"):
            load_defaults_config(write_config(tmp_path, "review:\n  approve_message: 3\n"))


class TestParseBoolInput:
    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_true_values(self, value):
        assert parse_bool_input(value, "auto-approve") is True

    @pytest.mark.parametrize("value", ["false", "False", "FALSE"])
    def test_false_values(self, value):
        assert parse_bool_input(value, "auto-approve") is False

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_uses_default(self, value):
        assert parse_bool_input(value, "auto-approve") is False
        assert parse_bool_input(value, "auto-approve", default=True) is True

    @pytest.mark.parametrize("value", ["yes", "1", "tRuE"])
    def test_rejects_other_values(self, value):
        with pytest.raises(ConfigError, match="auto-approve"):
            parse_bool_input(value, "auto-approve")
