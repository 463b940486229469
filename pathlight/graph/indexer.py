"""Edge indexing and node categorization for diagram source text."""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from .diagram_graph import DiagramGraph
from .node_types import EdgeEnd, NodeCategory

logger = logging.getLogger(__name__)

# fromNode -->|label| toNode, searched anywhere on a line
EDGE_PATTERN = re.compile(r"([^\s]+)\s*-->\|([^\|]+)\|\s*([^\s]+)")

# Terminal-shape decoration, e.g. E1((Done))
DECORATION_PATTERN = re.compile(r"\(\(.+\)\)")

Classifier = Callable[[str, EdgeEnd], NodeCategory | None]


@dataclass(frozen=True)
class GraphSource:
    """Diagram source text as an immutable sequence of lines."""

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "GraphSource":
        return cls(tuple(text.split("\n")))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class Edge:
    """A labeled edge found in the source, with its position in source order."""

    from_node: str
    label: str
    to_node: str
    sequence_index: int

    @property
    def key(self) -> str:
        return edge_key(self.from_node, self.label, self.to_node)


def edge_key(from_node: str, label: str, to_node: str) -> str:
    """Build the canonical key used to look an edge up by its endpoints."""
    return f"{from_node}->{label}->{to_node}"


def strip_decoration(token: str) -> str:
    """Remove a ``((...))`` shape decoration from a node token."""
    return DECORATION_PATTERN.sub("", token, count=1)


@dataclass(frozen=True)
class PrefixClassifier:
    """Classify nodes by the first letters of their identifiers.

    Source nodes can be start or decision nodes; target nodes can be
    ending nodes.
    """

    start: str = "S"
    decision: str = "D"
    ending: str = "E"

    def __call__(self, name: str, end: EdgeEnd) -> NodeCategory | None:
        if end == EdgeEnd.SOURCE:
            if name.startswith(self.start):
                return NodeCategory.START
            if name.startswith(self.decision):
                return NodeCategory.DECISION
        elif name.startswith(self.ending):
            return NodeCategory.ENDING
        return None


@dataclass
class EdgeIndex:
    """Result of indexing a diagram: its edges in order and its node categories."""

    edges: list[Edge] = field(default_factory=list)
    categories: dict[NodeCategory, dict[str, None]] = field(
        default_factory=lambda: {category: {} for category in NodeCategory}
    )
    graph: DiagramGraph = field(default_factory=DiagramGraph, compare=False, repr=False)
    _first_index: dict[str, int] = field(default_factory=dict, compare=False, repr=False)

    def add_edge(self, from_node: str, label: str, to_node: str) -> Edge:
        """Append an edge with the next sequence index."""
        edge = Edge(from_node, label, to_node, len(self.edges))
        self.edges.append(edge)
        self._first_index.setdefault(edge.key, edge.sequence_index)
        self.graph.add_edge(from_node, to_node, label, edge.sequence_index, edge.key)
        return edge

    def add_to_category(self, name: str, category: NodeCategory) -> None:
        self.categories[category].setdefault(name, None)
        self.graph.add_node(name, category)

    def first_index(self, key: str) -> int | None:
        """Get the index of the first edge with this key, or None."""
        return self._first_index.get(key)

    def occurrences(self, key: str) -> list[int]:
        """Get the indices of every edge with this key."""
        return [edge.sequence_index for edge in self.edges if edge.key == key]

    def members(self, category: NodeCategory) -> tuple[str, ...]:
        """Get the nodes in a category, in the order they were found."""
        return tuple(self.categories[category])

    @property
    def sequence_table(self) -> list[str]:
        """Get the edge keys in sequence order."""
        return [edge.key for edge in self.edges]


def index_edges(
    source: GraphSource | str,
    classifier: Classifier | None = None,
) -> EdgeIndex:
    """Index the labeled edges of a diagram and categorize their nodes.

    Lines that do not contain a ``from -->|label| to`` edge are skipped.

    Args:
        source: The diagram source, as a GraphSource or raw text.
        classifier: Maps a node and its edge end to a category. Defaults to
            a PrefixClassifier.

    Returns:
        The EdgeIndex for the source.
    """
    if isinstance(source, str):
        source = GraphSource.from_text(source)
    if classifier is None:
        classifier = PrefixClassifier()

    index = EdgeIndex()

    for line in source.lines:
        match = EDGE_PATTERN.search(line)
        if not match:
            continue

        from_node = strip_decoration(match.group(1))
        label = match.group(2)
        to_node = strip_decoration(match.group(3))
        index.add_edge(from_node, label, to_node)

        for name, end in ((from_node, EdgeEnd.SOURCE), (to_node, EdgeEnd.TARGET)):
            category = classifier(name, end)
            if category is not None:
                index.add_to_category(name, category)

    logger.debug("Indexed %d edge(s) from %d line(s)", len(index.edges), len(source.lines))
    return index
