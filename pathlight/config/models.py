"""Pydantic models for Pathlight configuration."""

from pydantic import BaseModel, Field, field_validator

from ..graph.indexer import PrefixClassifier
from ..graph.node_types import NodeCategory

PATH_DELIMITER = " -> "


def _props(**values: str) -> dict[str, str]:
    """Build a property map, turning underscores in keys into dashes."""
    return {key.replace("_", "-"): value for key, value in values.items()}


class StylePalette(BaseModel):
    """Visual properties for each generated class and for highlighted edges.

    Property order is kept when rendering, so the defaults render exactly as
    ``fill:...,stroke:...,stroke-width:...``.
    """

    start: dict[str, str] = Field(
        default_factory=lambda: _props(
            fill="#a8e6cf", stroke="#2b7a4b", stroke_width="2px"
        )
    )
    decision: dict[str, str] = Field(
        default_factory=lambda: _props(
            fill="#d0e8f2", stroke="#4682b4", stroke_width="2px"
        )
    )
    ending: dict[str, str] = Field(
        default_factory=lambda: _props(fill="#f9a", stroke="#333", stroke_width="2px")
    )
    highlight_node: dict[str, str] = Field(
        default_factory=lambda: _props(stroke="#3366FF", stroke_width="5px")
    )
    highlight_edge: dict[str, str] = Field(
        default_factory=lambda: _props(stroke="#3366FF", stroke_width="5px")
    )

    def for_category(self, category: NodeCategory) -> dict[str, str]:
        """Get the properties for a node category."""
        return getattr(self, category.value)


class CategoryPrefixes(BaseModel):
    """Identifier prefixes that mark a node's category."""

    start: str = Field(default="S", min_length=1)
    decision: str = Field(default="D", min_length=1)
    ending: str = Field(default="E", min_length=1)

    def classifier(self) -> PrefixClassifier:
        """Build the classifier for these prefixes."""
        return PrefixClassifier(
            start=self.start, decision=self.decision, ending=self.ending
        )


class PathlightConfig(BaseModel):
    """Root model for a Pathlight YAML config file."""

    palette: StylePalette = Field(default_factory=StylePalette)
    prefixes: CategoryPrefixes = Field(default_factory=CategoryPrefixes)
    paths: list[str] = Field(default_factory=list)

    @field_validator("paths", mode="before")
    @classmethod
    def normalize_paths(cls, value: object) -> object:
        """Accept each path as a joined string or as a list of tokens."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list):
            return value

        normalized = []
        for path in value:
            if isinstance(path, list):
                normalized.append(PATH_DELIMITER.join(str(token) for token in path))
            else:
                normalized.append(path)
        return normalized
