"""Exceptions raised while reading diagrams and configs."""

from enum import Enum


class InputKind(str, Enum):
    """Which input file a load error came from."""

    DIAGRAM = "diagram"
    CONFIG = "config"


class PathlightError(Exception):
    """Base class for errors reading Pathlight inputs.

    The styling transform itself never raises; only file and config
    handling does.
    """

    def __init__(self, message: str, kind: InputKind, path: str | None = None):
        self.kind = kind
        self.path = path
        super().__init__(message)

    def describe(self) -> str:
        """One-line message naming the input that failed."""
        where = f" {self.path}" if self.path else ""
        return f"{self.kind.value} file{where}: {self}"


class ConfigLoadError(PathlightError):
    """Raised when a diagram or config file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        kind: InputKind = InputKind.CONFIG,
    ):
        super().__init__(message, kind, path)


class ConfigValidationError(PathlightError):
    """Raised when a config parses but does not match the config model.

    ``errors`` holds one ``{"loc", "msg", "type"}`` dict per field problem.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        path: str | None = None,
    ):
        self.errors = errors or []
        super().__init__(message, InputKind.CONFIG, path)
