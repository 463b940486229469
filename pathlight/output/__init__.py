"""Output formatting for styling results."""

from .formatter import format_edge_table, format_style_result

__all__ = ["format_edge_table", "format_style_result"]
