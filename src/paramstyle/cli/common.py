"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from paramstyle.codec import load
from paramstyle.config import ParamStyleConfig
from paramstyle.errors import CodecError
from paramstyle.model.params import Sets


def load_sets_or_exit(paramsfile: str) -> Sets:
    """Load a Sets document, printing the error and exiting 1 on failure."""
    try:
        return load(Path(paramsfile), Sets)
    except CodecError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)


def config_from(ctx: click.Context) -> ParamStyleConfig:
    """The config built by the ``cli`` group, or defaults when run standalone."""
    return ctx.obj if isinstance(ctx.obj, ParamStyleConfig) else ParamStyleConfig()
