"""Command-line interface for Pathlight."""

import logging
import sys
from pathlib import Path

import click

from .config.errors import ConfigValidationError, PathlightError
from .output.formatter import format_edge_table, format_style_result


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _report_and_exit(error: PathlightError) -> None:
    """Print an input error, naming the file that failed, and exit with code 2."""
    click.echo(f"Error loading {error.describe()}", err=True)
    if isinstance(error, ConfigValidationError):
        for err in error.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
    sys.exit(2)


@click.group()
@click.version_option(package_name="pathlight")
def main():
    """Pathlight: category and path highlighting for Mermaid flowcharts."""
    pass


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--path",
    "paths",
    multiple=True,
    help='Path to highlight, e.g. "S1 -> go -> D1". May be repeated.',
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML config with palette, prefixes and paths",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "markdown", "html"]),
    default="text",
    help="Output format",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write output to this file instead of stdout",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug details")
def style(
    graph_file: str,
    paths: tuple[str, ...],
    config_file: str | None,
    output_format: str,
    output_file: str | None,
    verbose: bool,
):
    """Add category and path styling to a diagram file.

    GRAPH_FILE is the path to a Mermaid flowchart source file.

    Paths from the config file are highlighted first, then any --path options.

    Exit codes:
      0 - Success
      2 - File or config error
    """
    from .styling.runner import style_graph_file

    _configure_logging(verbose)

    try:
        result = style_graph_file(graph_file, paths, config_file)
    except PathlightError as e:
        _report_and_exit(e)

    output = format_style_result(result, output_format)  # type: ignore

    if output_file:
        Path(output_file).write_text(output, encoding="utf-8")
        click.echo(f"Wrote: {output_file}")
    else:
        click.echo(output, nl=False)

    sys.exit(0)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML config with category prefixes",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def edges(graph_file: str, config_file: str | None, output_format: str):
    """List the indexed edges and node categories of a diagram.

    GRAPH_FILE is the path to a Mermaid flowchart source file.

    Exit codes:
      0 - Success
      2 - File or config error
    """
    from .config.loader import load_inputs
    from .graph.indexer import index_edges

    try:
        source, config = load_inputs(graph_file, config_file)
    except PathlightError as e:
        _report_and_exit(e)

    index = index_edges(source, config.prefixes.classifier())
    click.echo(format_edge_table(index, output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
