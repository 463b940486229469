"""Reading diagram files and YAML configs."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from ..graph.indexer import GraphSource
from .errors import ConfigLoadError, ConfigValidationError, InputKind
from .models import PathlightConfig


def load_graph_source(path: str | Path) -> GraphSource:
    """Read a diagram source file.

    Raises:
        ConfigLoadError: If the file is missing or unreadable. The error's
            ``kind`` is ``InputKind.DIAGRAM``.
    """
    text = _read_text(Path(path), InputKind.DIAGRAM)
    return GraphSource.from_text(text)


def load_config(path: str | Path) -> PathlightConfig:
    """Read a YAML config file.

    An empty file gives the default config.

    Raises:
        ConfigLoadError: If the file cannot be read or is not a YAML mapping.
        ConfigValidationError: If the mapping does not fit PathlightConfig.
    """
    path = Path(path)
    text = _read_text(path, InputKind.CONFIG)
    return _build_config(_yaml_mapping(text, str(path)), str(path))


def parse_config_from_string(yaml_string: str) -> PathlightConfig:
    """Parse config YAML held in memory.

    Raises:
        ConfigLoadError: If the text is not a YAML mapping.
        ConfigValidationError: If the mapping does not fit PathlightConfig.
    """
    return _build_config(_yaml_mapping(yaml_string))


def load_inputs(
    graph_path: str | Path,
    config_path: str | Path | None = None,
) -> tuple[GraphSource, PathlightConfig]:
    """Read a diagram together with its optional config.

    The config is read first, so a bad config is reported before the
    diagram is touched.

    Returns:
        The diagram source and the config (defaults when no path is given).
    """
    config = PathlightConfig() if config_path is None else load_config(config_path)
    return load_graph_source(graph_path), config


def _read_text(path: Path, kind: InputKind) -> str:
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}", str(path), kind)

    if not path.is_file():
        raise ConfigLoadError(f"Not a file: {path}", str(path), kind)

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Cannot read file: {e}", str(path), kind) from e


def _yaml_mapping(text: str, path: str | None = None) -> dict:
    """Parse YAML text that must hold a mapping, or nothing at all."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )

    return data


def _build_config(data: dict, path: str | None = None) -> PathlightConfig:
    try:
        return PathlightConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(part) for part in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ConfigValidationError(
            f"{len(errors)} invalid config value(s)", errors, path
        ) from e
