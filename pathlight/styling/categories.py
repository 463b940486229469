"""Class assignments and definitions for categorized nodes."""

from ..config.models import StylePalette
from ..graph.indexer import EdgeIndex
from ..graph.node_types import NodeCategory
from .directives import StyleDirective, class_assignment, class_definition


def style_categories(
    index: EdgeIndex, palette: StylePalette | None = None
) -> list[StyleDirective]:
    """Generate category styling for an indexed diagram.

    Emits one ``class`` assignment per categorized node (start nodes, then
    decision nodes, then ending nodes, each in the order they were found),
    followed by a ``classDef`` for every category. The definitions are
    emitted even when a category has no members.

    Args:
        index: The indexed diagram.
        palette: Visual properties to use. Defaults to the standard palette.

    Returns:
        List of directives in emission order.
    """
    if palette is None:
        palette = StylePalette()

    directives = [
        class_assignment(node, category.value)
        for category in NodeCategory
        for node in index.members(category)
    ]

    for category in NodeCategory:
        directives.append(
            class_definition(category.value, palette.for_category(category))
        )

    return directives
