"""Styling layer: category classes, path highlights and output assembly."""

from .directives import (
    DirectiveKind,
    StyleDirective,
    class_assignment,
    class_definition,
    format_props,
    link_style,
)
from .categories import style_categories
from .highlighter import HighlightPath, highlight_paths
from .runner import StyleResult, assemble, style_graph, style_graph_file, style_graph_text

__all__ = [
    "DirectiveKind",
    "StyleDirective",
    "class_assignment",
    "class_definition",
    "format_props",
    "link_style",
    "style_categories",
    "HighlightPath",
    "highlight_paths",
    "StyleResult",
    "assemble",
    "style_graph",
    "style_graph_file",
    "style_graph_text",
]
