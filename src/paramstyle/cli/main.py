"""paramstyle CLI entry point: Click group with subcommands."""

import logging

import click

from paramstyle import __version__
from paramstyle.config import ParamStyleConfig


@click.group()
@click.version_option(version=__version__, prog_name="paramstyle")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for diagnostics on stderr",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """paramstyle - apply, diff and export selector-based parameter sets."""
    config = ParamStyleConfig(log_level=log_level.upper())
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from paramstyle.cli.apply import apply  # noqa: E402
from paramstyle.cli.diff import diff  # noqa: E402
from paramstyle.cli.export import export  # noqa: E402
from paramstyle.cli.show import show  # noqa: E402
from paramstyle.cli.validate import validate  # noqa: E402

cli.add_command(show)
cli.add_command(validate)
cli.add_command(diff)
cli.add_command(apply)
cli.add_command(export)
