"""Tests for diagram and config loading."""

import pytest

from pathlight.config.errors import (
    ConfigLoadError,
    ConfigValidationError,
    InputKind,
    PathlightError,
)
from pathlight.config.loader import (
    load_config,
    load_graph_source,
    load_inputs,
    parse_config_from_string,
)
from pathlight.config.models import PathlightConfig


class TestLoadConfig:
    def test_example_config(self, examples_dir):
        config = load_config(examples_dir / "checkout_paths.yaml")

        assert config.paths == [
            "S1 -> browse -> D1 -> buy -> D2 -> pay -> E2",
            "S1 -> browse -> D1 -> leave -> E1",
        ]

    def test_file_not_found(self):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config("/nonexistent/file.yaml")

        assert "not found" in str(exc_info.value)
        assert exc_info.value.kind == InputKind.CONFIG

    def test_directory_rejected(self, examples_dir):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(examples_dir)

        assert "Not a file" in str(exc_info.value)

    def test_invalid_yaml_keeps_path(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("paths: [unclosed")

        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(bad)

        assert "Invalid YAML" in str(exc_info.value)
        assert exc_info.value.path == str(bad)

    def test_non_mapping_root(self, examples_dir):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(examples_dir / "invalid" / "not_a_mapping.yaml")

        assert "Expected YAML mapping" in str(exc_info.value)

    def test_empty_file_gives_defaults(self, tmp_path):
        empty = tmp_path / "empty.yaml"
        empty.write_text("")

        assert load_config(empty) == PathlightConfig()

    def test_invalid_config(self, examples_dir):
        path = examples_dir / "invalid" / "bad_palette.yaml"

        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path)

        locs = {err["loc"] for err in exc_info.value.errors}
        assert "palette.start" in locs
        assert "prefixes.ending" in locs
        assert exc_info.value.kind == InputKind.CONFIG
        assert exc_info.value.path == str(path)


class TestParseConfigFromString:
    def test_empty_string_gives_defaults(self):
        config = parse_config_from_string("")

        assert config.paths == []
        assert config.prefixes.start == "S"

    def test_invalid_yaml_has_no_path(self):
        with pytest.raises(ConfigLoadError) as exc_info:
            parse_config_from_string("palette: {start: [")

        assert exc_info.value.path is None

    def test_non_mapping(self):
        with pytest.raises(ConfigLoadError) as exc_info:
            parse_config_from_string("- a\n- b\n")

        assert "got list" in str(exc_info.value)

    def test_validation_error(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            parse_config_from_string("prefixes:\n  start: ''\n")

        assert exc_info.value.errors[0]["loc"] == "prefixes.start"


class TestLoadGraphSource:
    def test_reads_lines(self, examples_dir):
        source = load_graph_source(examples_dir / "checkout_flow.mmd")

        assert source.lines[0] == "flowchart TD"

    def test_missing_is_diagram_error(self, tmp_path):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_graph_source(tmp_path / "nope.mmd")

        assert exc_info.value.kind == InputKind.DIAGRAM

    def test_undecodable_file(self, tmp_path):
        binary = tmp_path / "flow.mmd"
        binary.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(ConfigLoadError) as exc_info:
            load_graph_source(binary)

        assert "Cannot read file" in str(exc_info.value)


class TestLoadInputs:
    def test_without_config(self, examples_dir):
        source, config = load_inputs(examples_dir / "checkout_flow.mmd")

        assert source.lines[0] == "flowchart TD"
        assert config == PathlightConfig()

    def test_with_config(self, examples_dir):
        source, config = load_inputs(
            examples_dir / "checkout_flow.mmd", examples_dir / "checkout_paths.yaml"
        )

        assert len(config.paths) == 2
        assert source.text.startswith("flowchart TD\n")

    def test_config_error_reported_first(self, tmp_path, examples_dir):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_inputs(tmp_path / "missing.mmd", examples_dir / "invalid" / "not_a_mapping.yaml")

        assert exc_info.value.kind == InputKind.CONFIG


class TestPathlightError:
    def test_describe_names_kind_and_path(self):
        error = ConfigLoadError("File not found: x.mmd", "x.mmd", InputKind.DIAGRAM)

        assert isinstance(error, PathlightError)
        assert error.describe() == "diagram file x.mmd: File not found: x.mmd"

    def test_describe_without_path(self):
        error = ConfigValidationError("1 invalid config value(s)")

        assert error.describe() == "config file: 1 invalid config value(s)"
