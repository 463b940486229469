"""Pathlight: category and path highlighting for Mermaid flowcharts."""

from .styling.runner import style_graph, style_graph_text

__version__ = "0.1.0"

__all__ = ["style_graph", "style_graph_text", "__version__"]
