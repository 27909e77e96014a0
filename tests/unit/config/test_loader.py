"""Tests for action input loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from endorscan.config.loader import (
    ConfigError,
    dict_to_inputs,
    expand_env_vars,
    load_inputs,
    load_yaml_file,
)
from endorscan.config.models import DEFAULT_API, ActionInputs


class TestLoadInputs:
    """Tests for input layering."""

    def test_defaults(self) -> None:
        inputs = load_inputs(environ={})
        assert inputs == ActionInputs()
        assert inputs.api == DEFAULT_API
        assert inputs.enable_github_action_token is True
        assert inputs.scan_summary_output_type == "table"
        assert inputs.scan_path == "."
        assert inputs.download_retries == 0

    def test_env_inputs(self) -> None:
        environ = {
            "INPUT_NAMESPACE": "  my-org  ",
            "INPUT_ENDORCTL_VERSION": "v1.6.0",
            "INPUT_CI_RUN": "false",
            "INPUT_DOWNLOAD_RETRIES": "2",
        }
        inputs = load_inputs(environ=environ)
        assert inputs.namespace == "my-org"
        assert inputs.endorctl_version == "v1.6.0"
        assert inputs.ci_run is False
        assert inputs.download_retries == 2

    def test_empty_env_input_keeps_default(self) -> None:
        inputs = load_inputs(environ={"INPUT_API": "", "INPUT_RUN_STATS": "  "})
        assert inputs.api == DEFAULT_API
        assert inputs.run_stats is True

    def test_invalid_boolean(self) -> None:
        with pytest.raises(ConfigError, match="YAML 1.2"):
            load_inputs(environ={"INPUT_CI_RUN": "yes"})

    def test_invalid_integer(self) -> None:
        with pytest.raises(ConfigError):
            load_inputs(environ={"INPUT_DOWNLOAD_RETRIES": "many"})

    def test_negative_integer(self) -> None:
        with pytest.raises(ConfigError, match="negative"):
            load_inputs(environ={"INPUT_DOWNLOAD_RETRIES": "-1"})

    def test_precedence(self, tmp_path: Path) -> None:
        config = tmp_path / "inputs.yml"
        config.write_text(
            "namespace: from-file\n"
            "log_level: debug\n"
            "api: https://file.example.com\n"
        )
        environ = {"INPUT_NAMESPACE": "from-env", "INPUT_API": "https://env.example.com"}

        inputs = load_inputs(
            environ=environ,
            config_path=config,
            cli_overrides={"api": "https://cli.example.com", "sarif_file": None},
        )

        assert inputs.api == "https://cli.example.com"
        assert inputs.namespace == "from-env"
        assert inputs.log_level == "debug"
        assert inputs.sarif_file == ""

    def test_file_values_are_typed(self, tmp_path: Path) -> None:
        config = tmp_path / "inputs.yml"
        config.write_text("ci_run: false\ndownload_retries: 3\nnamespace: org\n")
        inputs = load_inputs(environ={}, config_path=config)
        assert inputs.ci_run is False
        assert inputs.download_retries == 3

    def test_unknown_file_keys_are_ignored(self, tmp_path: Path, caplog) -> None:
        caplog.set_level(logging.WARNING)
        config = tmp_path / "inputs.yml"
        config.write_text("namespce: org\n")
        inputs = load_inputs(environ={}, config_path=config)
        assert inputs.namespace == ""
        assert "Did you mean 'namespace'?" in caplog.text

    def test_missing_config_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_inputs(environ={}, config_path=tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "inputs.yml"
        config.write_text("namespace: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_inputs(environ={}, config_path=config)


class TestLoadYamlFile:
    """Tests for YAML input files."""

    def test_empty_file(self, tmp_path: Path) -> None:
        config = tmp_path / "inputs.yml"
        config.write_text("")
        assert load_yaml_file(config, {}) == {}

    def test_non_mapping(self, tmp_path: Path) -> None:
        config = tmp_path / "inputs.yml"
        config.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_yaml_file(config, {})

    def test_expands_variables(self, tmp_path: Path) -> None:
        config = tmp_path / "inputs.yml"
        config.write_text("api_key: ${ENDOR_KEY}\nnamespace: ${NS:-fallback}\n")
        data = load_yaml_file(config, {"ENDOR_KEY": "k"})
        assert data == {"api_key": "k", "namespace": "fallback"}


class TestExpandEnvVars:
    """Tests for ${VAR} expansion."""

    def test_nested(self) -> None:
        data = {"a": ["${X}", {"b": "pre-${X}-post"}], "c": 1}
        assert expand_env_vars(data, {"X": "v"}) == {"a": ["v", {"b": "pre-v-post"}], "c": 1}

    def test_unset_without_default(self) -> None:
        assert expand_env_vars("${MISSING}", {}) == ""

    def test_set_value_wins_over_default(self) -> None:
        assert expand_env_vars("${X:-d}", {"X": "v"}) == "v"


class TestDictToInputs:
    """Tests for value coercion."""

    def test_bool_passthrough(self) -> None:
        assert dict_to_inputs({"log_verbose": True}).log_verbose is True

    def test_bool_rejected_for_integer(self) -> None:
        with pytest.raises(ConfigError):
            dict_to_inputs({"download_retries": True})

    def test_none_string(self) -> None:
        assert dict_to_inputs({"namespace": None}).namespace == ""

    def test_strings_are_stripped(self) -> None:
        assert dict_to_inputs({"namespace": " org "}).namespace == "org"
