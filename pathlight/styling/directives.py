"""Style directives appended to diagram source."""

from dataclasses import dataclass, field
from enum import Enum


class DirectiveKind(str, Enum):
    """Kinds of generated style directive."""

    CLASS = "class"  # class <node> <category>;
    CLASS_DEF = "classDef"  # classDef <category> <props>;
    LINK_STYLE = "linkStyle"  # linkStyle <index> <props>;


def format_props(props: dict[str, str]) -> str:
    """Render a property map as ``key:value`` pairs joined by commas."""
    return ",".join(f"{key}:{value}" for key, value in props.items())


@dataclass(frozen=True)
class StyleDirective:
    """A single generated style statement."""

    kind: DirectiveKind
    target: str
    class_name: str | None = None
    props: dict[str, str] = field(default_factory=dict, hash=False)

    def render(self) -> str:
        if self.kind == DirectiveKind.CLASS:
            return f"class {self.target} {self.class_name};"
        return f"{self.kind.value} {self.target} {format_props(self.props)};"

    def __str__(self) -> str:
        return self.render()


def class_assignment(node: str, class_name: str) -> StyleDirective:
    return StyleDirective(DirectiveKind.CLASS, node, class_name=class_name)


def class_definition(class_name: str, props: dict[str, str]) -> StyleDirective:
    return StyleDirective(DirectiveKind.CLASS_DEF, class_name, props=dict(props))


def link_style(index: int, props: dict[str, str]) -> StyleDirective:
    return StyleDirective(DirectiveKind.LINK_STYLE, str(index), props=dict(props))
