"""CLI command: selector-builder combine -- join two selectors."""

from __future__ import annotations

import click

from selector_builder.facade import css_selector_builder


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join LEFT and RIGHT with COMBINATOR (' ', '>', '+' or '~')."""
    click.echo(css_selector_builder.combine(left, combinator, right).stringify())
