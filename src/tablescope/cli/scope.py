"""CLI command: tablescope scope -- rewrite a rendered table for embedding."""

from __future__ import annotations

import click

from tablescope.config import ScopeConfig
from tablescope.rewriter import scope_markup


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8", errors="surrogateescape"))
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8", errors="surrogateescape"),
    default="-",
    help="Where to write the scoped HTML (default: stdout)",
)
@click.option("--class-prefix", default="gt_", show_default=True, help="Renderer class prefix")
@click.option("--rename-prefix", default="new_", show_default=True, help="Prefix inserted before renderer classes")
@click.option("--root-class", default="gt_table", show_default=True, help="Class of the table root element")
@click.option(
    "--disable-host-processing/--keep-host-processing",
    default=False,
    help="Stop the host document system from restyling the table",
)
@click.option("--reset-container", is_flag=True, help="Wrap the output in a style-reset container")
def scope(
    source,
    output,
    class_prefix: str,
    rename_prefix: str,
    root_class: str,
    disable_host_processing: bool,
    reset_container: bool,
) -> None:
    """Scope the style rules of a rendered table HTML file.

    SOURCE is an HTML fragment produced with inline styling disabled, or '-'
    to read from stdin.
    """
    try:
        config = ScopeConfig(
            class_prefix=class_prefix,
            rename_prefix=rename_prefix,
            root_class=root_class,
            disable_host_processing=disable_host_processing,
            reset_container=reset_container,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    output.write(scope_markup(source.read(), config))
