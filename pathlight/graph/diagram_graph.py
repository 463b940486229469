"""DiagramGraph wrapper around networkx for indexed diagram edges."""

from typing import Any

import networkx as nx

from .node_types import NodeCategory


class DiagramGraph:
    """A graph view of the labeled edges found in a diagram.

    Wraps a networkx MultiDiGraph. Every matched edge occurrence becomes its
    own multigraph edge keyed by its sequence index, so duplicate edges stay
    distinct.
    """

    def __init__(self):
        """Initialize an empty diagram graph."""
        self._graph = nx.MultiDiGraph()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Node and edge management
    # -------------------------------------------------------------------------

    def add_node(self, name: str, category: NodeCategory | None = None) -> None:
        """Add a node, keeping the first category assigned to it.

        Args:
            name: The bare node identifier.
            category: The node's category, if any.
        """
        if self._graph.has_node(name):
            if category is not None and self._graph.nodes[name].get("category") is None:
                self._graph.nodes[name]["category"] = category
            return
        self._graph.add_node(name, category=category)

    def add_edge(
        self,
        from_node: str,
        to_node: str,
        label: str,
        sequence_index: int,
        edge_key: str,
    ) -> None:
        """Add one edge occurrence.

        Args:
            from_node: The source node identifier.
            to_node: The target node identifier.
            label: The edge label, as written.
            sequence_index: Position of the edge in source order.
            edge_key: The canonical edge key.
        """
        self.add_node(from_node)
        self.add_node(to_node)
        self._graph.add_edge(
            from_node,
            to_node,
            key=sequence_index,
            label=label,
            edge_key=edge_key,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_node(self, name: str) -> bool:
        """Check whether a node appears in any indexed edge."""
        return self._graph.has_node(name)

    def get_node_names(self) -> list[str]:
        """Get all node names in first-seen order."""
        return list(self._graph.nodes)

    def get_category(self, name: str) -> NodeCategory | None:
        """Get the category of a node, or None if it has none."""
        if not self._graph.has_node(name):
            return None
        return self._graph.nodes[name].get("category")

    def get_edges(self) -> list[dict[str, Any]]:
        """Get all edge occurrences ordered by sequence index."""
        edges = [
            {
                "from": source,
                "to": target,
                "label": data["label"],
                "index": key,
                "key": data["edge_key"],
            }
            for source, target, key, data in self._graph.edges(keys=True, data=True)
        ]
        edges.sort(key=lambda e: e["index"])
        return edges

    def get_outgoing(self, name: str) -> list[dict[str, Any]]:
        """Get the edges leaving a node, ordered by sequence index."""
        if not self._graph.has_node(name):
            return []

        edges = [
            {"to": target, "label": data["label"], "index": key}
            for _, target, key, data in self._graph.out_edges(
                name, keys=True, data=True
            )
        ]
        edges.sort(key=lambda e: e["index"])
        return edges
