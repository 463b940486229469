"""Config layer for loading palettes, prefixes and paths from YAML."""

from .errors import ConfigLoadError, ConfigValidationError, InputKind, PathlightError
from .models import PATH_DELIMITER, CategoryPrefixes, PathlightConfig, StylePalette
from .loader import load_config, load_graph_source, load_inputs, parse_config_from_string

__all__ = [
    "ConfigLoadError",
    "ConfigValidationError",
    "InputKind",
    "PathlightError",
    "PATH_DELIMITER",
    "CategoryPrefixes",
    "PathlightConfig",
    "StylePalette",
    "load_config",
    "load_graph_source",
    "load_inputs",
    "parse_config_from_string",
]
