"""CLI command: selector-builder build -- assemble a compound selector."""

from __future__ import annotations

import sys

import click

from selector_builder.builder import SelectorBuilder
from selector_builder.errors import SelectorError

PART_KINDS = ["element", "id", "class", "attr", "pseudo-class", "pseudo-element"]


def apply_part(builder: SelectorBuilder, kind: str, value: str) -> SelectorBuilder:
    """Call the builder method matching a CLI part name."""
    method = {
        "element": builder.element,
        "id": builder.id,
        "class": builder.class_,
        "attr": builder.attr,
        "pseudo-class": builder.pseudo_class,
        "pseudo-element": builder.pseudo_element,
    }[kind]
    return method(value)


@click.command()
@click.option(
    "--part",
    "parts",
    multiple=True,
    required=True,
    type=(click.Choice(PART_KINDS), str),
    help="Fragment kind and value, applied in the order given",
)
def build(parts: tuple[tuple[str, str], ...]) -> None:
    """Build a compound selector from ordered parts.

    Example:

        selector-builder build --part element a --part pseudo-class focus
    """
    builder = SelectorBuilder()
    try:
        for kind, value in parts:
            apply_part(builder, kind, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())
