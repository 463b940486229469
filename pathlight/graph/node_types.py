"""Node category and edge role definitions for diagram graphs."""

from enum import Enum


class NodeCategory(str, Enum):
    """Semantic categories a diagram node can belong to.

    The value doubles as the Mermaid class name.
    """

    START = "start"
    DECISION = "decision"
    ENDING = "ending"


class EdgeEnd(str, Enum):
    """Which end of an edge an identifier was found at."""

    SOURCE = "source"  # fromNode
    TARGET = "target"  # toNode


# Class applied to nodes on a highlighted path
HIGHLIGHT_CLASS = "highlightedNode"
