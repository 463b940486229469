"""Renderer and event seams around an external diagram engine."""

from .events import DiagramEvent, ElementRef, EventKind, EventRouter
from .framework import DiagramRenderer, HtmlRenderer, MarkdownRenderer, RenderHandle

__all__ = [
    "DiagramEvent",
    "ElementRef",
    "EventKind",
    "EventRouter",
    "DiagramRenderer",
    "HtmlRenderer",
    "MarkdownRenderer",
    "RenderHandle",
]
