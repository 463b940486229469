"""Routing of clicks on a rendered diagram to node and edge callbacks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class EventKind(str, Enum):
    """Semantic events a host forwards from a rendered diagram."""

    NODE_ACTIVATED = "node_activated"
    EDGE_ACTIVATED = "edge_activated"


@dataclass(frozen=True)
class ElementRef:
    """A rendered element and its ancestors, as seen by a click handler."""

    tag: str = "g"
    classes: frozenset[str] = frozenset()
    element_id: str | None = None
    text: str | None = None
    parent: "ElementRef | None" = None

    def matches(self, selector: str) -> bool:
        """Check a ``.class`` or ``tag.class`` selector against this element."""
        tag, _, class_name = selector.partition(".")
        if tag and tag != self.tag:
            return False
        return not class_name or class_name in self.classes

    def closest(self, selector: str) -> "ElementRef | None":
        """Find this element or the nearest ancestor matching the selector."""
        element: ElementRef | None = self
        while element is not None:
            if element.matches(selector):
                return element
            element = element.parent
        return None


@dataclass(frozen=True)
class DiagramEvent:
    """An event raised by a click on the diagram."""

    kind: EventKind
    payload: str


@dataclass
class EventRouter:
    """Turns clicked elements into node and edge activation callbacks."""

    _node_callbacks: list[Callable[[str], None]] = field(default_factory=list)
    _edge_callbacks: list[Callable[[str], None]] = field(default_factory=list)

    def on_node_activated(self, callback: Callable[[str], None]) -> None:
        """Subscribe to node clicks. The payload is the node's element id."""
        self._node_callbacks.append(callback)

    def on_edge_activated(self, callback: Callable[[str], None]) -> None:
        """Subscribe to edge clicks.

        The payload is the edge label text, or the edge path id when the
        label is empty.
        """
        self._edge_callbacks.append(callback)

    def resolve(self, target: ElementRef) -> DiagramEvent | None:
        """Work out which event, if any, a click on ``target`` means."""
        node = target.closest(".node")
        if node is not None:
            if node.element_id:
                return DiagramEvent(EventKind.NODE_ACTIVATED, node.element_id)
            return None

        if target.closest(".edgeLabel") is None and target.closest(".edgePaths") is None:
            return None

        label = target.closest(".edgeLabel")
        if label is not None and label.text:
            return DiagramEvent(EventKind.EDGE_ACTIVATED, label.text)

        path = target.closest("path.edge-thickness-normal")
        if path is not None and path.element_id:
            return DiagramEvent(EventKind.EDGE_ACTIVATED, path.element_id)

        return None

    def dispatch(self, target: ElementRef) -> DiagramEvent | None:
        """Resolve a click and call the matching subscribers.

        Returns:
            The event that was fired, or None if the click was ignored.
        """
        event = self.resolve(target)
        if event is None:
            return None

        if event.kind == EventKind.NODE_ACTIVATED:
            callbacks = self._node_callbacks
        else:
            callbacks = self._edge_callbacks

        for callback in callbacks:
            callback(event.payload)

        return event
