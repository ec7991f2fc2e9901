"""objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__
from objkit.config import ObjkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """objkit - CSS selector builder, rectangle model and typed JSON codec."""
    config = ObjkitConfig()
    if verbose:
        logging.basicConfig(
            level=config.verbose_log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = config


# Import and register subcommands
from objkit.cli.selector import combine, selector  # noqa: E402
from objkit.cli.objects import area, decode  # noqa: E402

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(area)
cli.add_command(decode)
