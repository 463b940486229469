"""Tests for config models."""

import pytest
from pydantic import ValidationError

from pathlight.config.models import CategoryPrefixes, PathlightConfig, StylePalette
from pathlight.graph.indexer import PrefixClassifier
from pathlight.graph.node_types import EdgeEnd, NodeCategory


class TestStylePalette:
    def test_defaults(self):
        palette = StylePalette()

        assert palette.start == {
            "fill": "#a8e6cf",
            "stroke": "#2b7a4b",
            "stroke-width": "2px",
        }
        assert palette.decision == {
            "fill": "#d0e8f2",
            "stroke": "#4682b4",
            "stroke-width": "2px",
        }
        assert palette.ending == {"fill": "#f9a", "stroke": "#333", "stroke-width": "2px"}
        assert palette.highlight_node == {"stroke": "#3366FF", "stroke-width": "5px"}
        assert palette.highlight_edge == {"stroke": "#3366FF", "stroke-width": "5px"}

    def test_default_key_order(self):
        assert list(StylePalette().start) == ["fill", "stroke", "stroke-width"]

    def test_for_category(self):
        palette = StylePalette()

        assert palette.for_category(NodeCategory.ENDING) is palette.ending

    def test_defaults_not_shared(self):
        first = StylePalette()
        first.start["fill"] = "#000"

        assert StylePalette().start["fill"] == "#a8e6cf"


class TestCategoryPrefixes:
    def test_classifier(self):
        classifier = CategoryPrefixes(start="B").classifier()

        assert classifier == PrefixClassifier(start="B", decision="D", ending="E")
        assert classifier("B1", EdgeEnd.SOURCE) == NodeCategory.START

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValidationError):
            CategoryPrefixes(decision="")


class TestPathlightConfig:
    def test_string_paths(self):
        config = PathlightConfig.model_validate({"paths": ["A -> x -> B"]})

        assert config.paths == ["A -> x -> B"]

    def test_token_list_paths(self):
        config = PathlightConfig.model_validate(
            {"paths": [["A", "x", "B"], "C -> y -> D"]}
        )

        assert config.paths == ["A -> x -> B", "C -> y -> D"]

    def test_single_path_string(self):
        config = PathlightConfig.model_validate({"paths": "A -> x -> B"})

        assert config.paths == ["A -> x -> B"]

    def test_null_paths(self):
        config = PathlightConfig.model_validate({"paths": None})

        assert config.paths == []

    def test_partial_palette_override(self):
        config = PathlightConfig.model_validate(
            {"palette": {"ending": {"fill": "#fff"}}}
        )

        assert config.palette.ending == {"fill": "#fff"}
        assert config.palette.start["fill"] == "#a8e6cf"
