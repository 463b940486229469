"""Highlighting of traversal paths through a diagram."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from ..config.models import PATH_DELIMITER, StylePalette
from ..graph.indexer import EdgeIndex, edge_key
from ..graph.node_types import HIGHLIGHT_CLASS
from .directives import StyleDirective, class_assignment, class_definition, link_style

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighlightPath:
    """An alternating node, label, node, ... sequence through a diagram."""

    tokens: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> "HighlightPath":
        """Split a path string on the exact `` -> `` delimiter."""
        return cls(tuple(text.split(PATH_DELIMITER)))

    def steps(self) -> Iterator[tuple[str, str, str]]:
        """Yield each (from, label, to) step.

        A trailing label or node that does not complete a step is ignored.
        """
        for i in range(0, len(self.tokens) - 2, 2):
            yield self.tokens[i], self.tokens[i + 1], self.tokens[i + 2]

    def __str__(self) -> str:
        return PATH_DELIMITER.join(self.tokens)


def highlight_paths(
    index: EdgeIndex,
    paths: Iterable[HighlightPath | str],
    palette: StylePalette | None = None,
) -> list[StyleDirective]:
    """Generate highlight styling for each path.

    For every step, both nodes get the highlight class. The step's edge gets
    a ``linkStyle`` only if it was indexed; when the same edge appears more
    than once, the first occurrence is styled. Steps whose edge is not in the
    diagram only lose their ``linkStyle``.

    The highlight ``classDef`` is always emitted last, even with no paths.

    Args:
        index: The indexed diagram.
        paths: Paths as HighlightPath objects or ``" -> "``-joined strings.
        palette: Visual properties to use. Defaults to the standard palette.

    Returns:
        List of directives in emission order.
    """
    if palette is None:
        palette = StylePalette()

    directives: list[StyleDirective] = []

    for path in paths:
        if isinstance(path, str):
            path = HighlightPath.parse(path)

        for from_node, label, to_node in path.steps():
            directives.append(class_assignment(from_node, HIGHLIGHT_CLASS))
            directives.append(class_assignment(to_node, HIGHLIGHT_CLASS))

            for node in (from_node, to_node):
                if not index.graph.has_node(node):
                    logger.debug("Highlighted node %r is not in the diagram", node)

            key = edge_key(from_node, label, to_node)
            link_index = index.first_index(key)
            if link_index is None:
                logger.debug("No indexed edge for path step %r", key)
                continue

            directives.append(link_style(link_index, palette.highlight_edge))

    directives.append(class_definition(HIGHLIGHT_CLASS, palette.highlight_node))
    return directives
