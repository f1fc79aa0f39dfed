"""selector-builder CLI entry point: Click group with subcommands."""

import logging

import click

from selector_builder import __version__
from selector_builder.config import BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option(
    "--log-level",
    default=BuilderConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """selector-builder - assemble CSS selectors with ordering checks."""
    config = BuilderConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level, format=config.log_format)
    ctx.obj = config


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.combine import combine  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
