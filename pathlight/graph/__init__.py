"""Graph layer: edge indexing and the networkx view of a diagram."""

from .node_types import HIGHLIGHT_CLASS, EdgeEnd, NodeCategory
from .diagram_graph import DiagramGraph
from .indexer import (
    Classifier,
    Edge,
    EdgeIndex,
    GraphSource,
    PrefixClassifier,
    edge_key,
    index_edges,
    strip_decoration,
)

__all__ = [
    "HIGHLIGHT_CLASS",
    "EdgeEnd",
    "NodeCategory",
    "DiagramGraph",
    "Classifier",
    "Edge",
    "EdgeIndex",
    "GraphSource",
    "PrefixClassifier",
    "edge_key",
    "index_edges",
    "strip_decoration",
]
