"""Output formatting for styling results and edge tables."""

import json
from typing import Literal

from ..graph.indexer import EdgeIndex
from ..graph.node_types import NodeCategory
from ..render.framework import HtmlRenderer, MarkdownRenderer
from ..styling.runner import StyleResult


def format_style_result(
    result: StyleResult,
    format: Literal["text", "json", "markdown", "html"] = "text",
) -> str:
    """Format a styling result for output.

    Args:
        result: The styling result to format.
        format: Output format ("text", "json", "markdown" or "html").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_result_json(result)
    if format == "markdown":
        return MarkdownRenderer().render(result.text).content
    if format == "html":
        return HtmlRenderer().render(result.text).content
    return result.text


def format_edge_table(
    index: EdgeIndex,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format the sequence table and categories of an indexed diagram.

    Args:
        index: The indexed diagram.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(_index_data(index), indent=2)
    return _format_edge_table_text(index)


def _format_edge_table_text(index: EdgeIndex) -> str:
    """Format the edge table as human-readable text."""
    lines: list[str] = []

    lines.append("EDGES:")
    if index.edges:
        for edge in index.edges:
            first = index.first_index(edge.key)
            note = "" if first == edge.sequence_index else f" (duplicate of {first})"
            lines.append(f"  {edge.sequence_index}: {edge.key}{note}")
    else:
        lines.append("  (none)")

    for category in NodeCategory:
        lines.append("")
        lines.append(f"{category.value.upper()}:")
        members = index.members(category)
        if members:
            lines.append(f"  {', '.join(members)}")
        else:
            lines.append("  (none)")

    lines.append("")
    lines.append(
        f"{len(index.edges)} edge(s), {len(index.graph.get_node_names())} node(s)"
    )

    return "\n".join(lines)


def _index_data(index: EdgeIndex) -> dict:
    return {
        "edges": index.graph.get_edges(),
        "categories": {
            category.value: list(index.members(category)) for category in NodeCategory
        },
        "nodes": [_node_data(index, name) for name in index.graph.get_node_names()],
    }


def _node_data(index: EdgeIndex, name: str) -> dict:
    """Describe one node: its category and the edges leaving it."""
    category = index.graph.get_category(name)
    return {
        "name": name,
        "category": category.value if category else None,
        "outgoing": index.graph.get_outgoing(name),
    }


def _format_result_json(result: StyleResult) -> str:
    """Format result as JSON."""
    data = _index_data(result.index)
    data["directives"] = [directive.render() for directive in result.directives]
    data["text"] = result.text
    return json.dumps(data, indent=2)
