"""Renderer seam for handing styled diagrams to a drawing engine.

Pathlight never lays out or draws a diagram itself. A renderer takes the
augmented diagram text and wraps it for whatever actually draws it.
"""

import html
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MERMAID_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.esm.min.mjs"


@dataclass(frozen=True)
class RenderHandle:
    """What a renderer produced for one diagram."""

    format_name: str
    content: str


class DiagramRenderer(ABC):
    """Abstract base class for diagram renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(self, text: str) -> RenderHandle:
        """Wrap diagram text for the rendering engine."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass


class MarkdownRenderer(DiagramRenderer):
    """Wraps diagram text in a Markdown Mermaid code fence."""

    @property
    def format_name(self) -> str:
        return "markdown"

    def get_file_extension(self) -> str:
        return ".md"

    def render(self, text: str) -> RenderHandle:
        return RenderHandle(self.format_name, "```mermaid\n" + text.rstrip() + "\n```\n")


class HtmlRenderer(DiagramRenderer):
    """Builds a standalone HTML page that draws the diagram with Mermaid.

    Clicks on nodes and edge labels are reported through
    ``window.pathlightEvents`` when the host page defines it, using the same
    element rules as :class:`pathlight.render.events.EventRouter`.
    """

    def __init__(self, title: str = "Pathlight diagram", script_url: str = MERMAID_SCRIPT_URL):
        self.title = title
        self.script_url = script_url

    @property
    def format_name(self) -> str:
        return "html"

    def get_file_extension(self) -> str:
        return ".html"

    def render(self, text: str) -> RenderHandle:
        logger.debug("Rendering %d character diagram as HTML", len(text))
        page = _HTML_TEMPLATE.format(
            title=html.escape(self.title),
            diagram=html.escape(text, quote=False),
            script_url=html.escape(self.script_url),
        )
        return RenderHandle(self.format_name, page)


_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div class="mermaid" style="display:flex;justify-content:center;align-items:center;width:100%;height:100%;">
{diagram}
</div>
<script type="module">
import mermaid from "{script_url}";
mermaid.initialize({{ startOnLoad: true }});
document.querySelector(".mermaid").addEventListener("click", (event) => {{
  const events = window.pathlightEvents;
  if (!events) return;
  const node = event.target.closest(".node");
  if (node) {{
    if (node.id && events.nodeActivated) events.nodeActivated(node.id);
    return;
  }}
  if (event.target.closest(".edgeLabel") || event.target.closest(".edgePaths")) {{
    const label = event.target.closest(".edgeLabel")?.textContent;
    const pathId = event.target.closest("path.edge-thickness-normal")?.id;
    const payload = label || pathId;
    if (payload && events.edgeActivated) events.edgeActivated(payload);
  }}
}});
</script>
</body>
</html>
"""
