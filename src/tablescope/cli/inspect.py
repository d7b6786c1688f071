"""CLI command: tablescope inspect -- report how a table would be scoped."""

from __future__ import annotations

import click

from tablescope.config import ScopeConfig
from tablescope.parser import parse_markup
from tablescope.rewriter import scope_markup
from tablescope.stylesheet import find_style_blocks, parse_style_rules
from tablescope.validation import validate
from tablescope.validation.rules import check_unscoped_selectors


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8", errors="surrogateescape"))
@click.option("--class-prefix", default="gt_", show_default=True, help="Renderer class prefix")
@click.option("--root-class", default="gt_table", show_default=True, help="Class of the table root element")
def inspect(source, class_prefix: str, root_class: str) -> None:
    """Show the identifier, style rules and diagnostics for a rendered table.

    Diagnostics are informational; the exit code is always 0.
    """
    try:
        config = ScopeConfig(class_prefix=class_prefix, root_class=root_class)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    text = source.read()
    document = parse_markup(text)
    rules = [r for css in find_style_blocks(document.head) for r in parse_style_rules(css)]

    click.echo(f"Identifier: {document.identifier or '(none)'}")
    click.echo(f"Rules:      {len(rules)}")
    click.echo(f"Selectors:  {sum(len(r.selectors) for r in rules)}")
    click.echo()

    click.echo("Input:")
    _echo_diagnostics(validate(document, config))

    scoped = parse_markup(scope_markup(text, config))
    click.echo("After scoping:")
    _echo_diagnostics(check_unscoped_selectors(scoped, config))


def _echo_diagnostics(diagnostics) -> None:
    if not diagnostics:
        click.echo("  OK (0 diagnostics)")
    for diag in diagnostics:
        click.echo(f"  {diag}")
    click.echo()
