"""Tests for category styling."""

from pathlight.config.models import StylePalette
from pathlight.graph.indexer import index_edges
from pathlight.styling.categories import style_categories

CLASS_DEFS = [
    "classDef start fill:#a8e6cf,stroke:#2b7a4b,stroke-width:2px;",
    "classDef decision fill:#d0e8f2,stroke:#4682b4,stroke-width:2px;",
    "classDef ending fill:#f9a,stroke:#333,stroke-width:2px;",
]


def _render(directives):
    return [d.render() for d in directives]


class TestStyleCategories:
    def test_decision_scenario(self, decision_index):
        lines = _render(style_categories(decision_index))

        assert lines == [
            "class S1 start;",
            "class D1 decision;",
            "class E1 ending;",
            *CLASS_DEFS,
        ]

    def test_assignments_grouped_by_category(self):
        index = index_edges("E0-->|a|E9\nD1-->|b|E2\nS1-->|c|D2\nD2-->|d|E3\nS2-->|e|X")

        lines = _render(style_categories(index))

        assert lines[:-3] == [
            "class S1 start;",
            "class S2 start;",
            "class D1 decision;",
            "class D2 decision;",
            "class E9 ending;",
            "class E2 ending;",
            "class E3 ending;",
        ]

    def test_unprefixed_node_gets_no_class(self):
        lines = _render(style_categories(index_edges("X1-->|a|Y1")))

        assert not any(line.startswith("class X1") for line in lines)

    def test_definitions_always_emitted(self):
        lines = _render(style_categories(index_edges("")))

        assert lines == CLASS_DEFS

    def test_custom_palette(self, decision_index):
        palette = StylePalette(start={"fill": "#000"})

        lines = _render(style_categories(decision_index, palette))

        assert "classDef start fill:#000;" in lines
        assert CLASS_DEFS[1] in lines
