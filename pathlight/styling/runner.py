"""Styling runner that assembles the augmented diagram."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from ..config.loader import load_inputs
from ..config.models import PathlightConfig
from ..graph.indexer import Classifier, EdgeIndex, GraphSource, index_edges
from .categories import style_categories
from .directives import StyleDirective
from .highlighter import HighlightPath, highlight_paths


@dataclass
class StyleResult:
    """Result of styling a diagram."""

    source: GraphSource
    index: EdgeIndex
    directives: list[StyleDirective] = field(default_factory=list)

    @property
    def text(self) -> str:
        """The source text followed by one directive per line."""
        return assemble(self.source, self.directives)


def assemble(source: GraphSource, directives: Iterable[StyleDirective]) -> str:
    """Append directives to the source text, one per line."""
    text = source.text
    if text and not text.endswith("\n"):
        text += "\n"
    return text + "".join(f"{directive.render()}\n" for directive in directives)


def style_graph(
    source: GraphSource | str,
    paths: Iterable[HighlightPath | str] = (),
    config: PathlightConfig | None = None,
    classifier: Classifier | None = None,
) -> StyleResult:
    """Index a diagram and generate its category and path styling.

    Args:
        source: The diagram source, as a GraphSource or raw text.
        paths: Paths to highlight, in emission order.
        config: Palette and prefixes to use. Paths listed in the config are
            not added here; callers merge them into ``paths``.
        classifier: Overrides the config's prefix classifier.

    Returns:
        StyleResult holding the index, the directives and the final text.
    """
    if isinstance(source, str):
        source = GraphSource.from_text(source)
    if config is None:
        config = PathlightConfig()
    if classifier is None:
        classifier = config.prefixes.classifier()

    index = index_edges(source, classifier)

    directives = style_categories(index, config.palette)
    directives.extend(highlight_paths(index, paths, config.palette))

    return StyleResult(source=source, index=index, directives=directives)


def style_graph_text(
    source: GraphSource | str,
    paths: Iterable[HighlightPath | str] = (),
    config: PathlightConfig | None = None,
    classifier: Classifier | None = None,
) -> str:
    """Style a diagram and return only the augmented text."""
    return style_graph(source, paths, config, classifier).text


def style_graph_file(
    path: str | Path,
    paths: Iterable[HighlightPath | str] = (),
    config_path: str | Path | None = None,
) -> StyleResult:
    """Load a diagram file, plus an optional config, and style it.

    Paths listed in the config are highlighted before ``paths``.

    Raises:
        ConfigLoadError: If either file cannot be read.
        ConfigValidationError: If the config is invalid.
    """
    source, config = load_inputs(path, config_path)
    return style_graph(source, [*config.paths, *paths], config)
