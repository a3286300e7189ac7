"""cssbuild CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
from dataclasses import replace

import click

from cssbuild import __version__
from cssbuild.config import CssBuildConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuild")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to $CSSBUILD_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """cssbuild - assemble CSS selectors from ordered parts."""
    config = CssBuildConfig.from_env()
    if log_level:
        config = replace(config, log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssbuild.cli.build import build, categories  # noqa: E402

cli.add_command(build)
cli.add_command(categories)
