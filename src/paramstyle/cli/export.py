"""CLI command: paramstyle export -- write params as Go initializer code."""

from __future__ import annotations

import dataclasses
import sys

import click

from paramstyle.cli.common import config_from, load_sets_or_exit
from paramstyle.codec import go_source, save_go_code
from paramstyle.errors import CodecIOError


@click.command()
@click.argument("paramsfile", type=click.Path(exists=True))
@click.option("--set", "set_name", default=None, help="Export a single set instead of all")
@click.option("--package", "go_package", default=None, help="Go package name (default: main)")
@click.option("--var", "go_var", default=None, help="Go variable name")
@click.option("-o", "--output", type=click.Path(), default=None, help="Output .go file (default: stdout)")
@click.pass_context
def export(
    ctx: click.Context,
    paramsfile: str,
    set_name: str | None,
    go_package: str | None,
    go_var: str | None,
    output: str | None,
) -> None:
    """Render a params file as Go initializer source code."""
    config = config_from(ctx)
    overrides = {}
    if go_package:
        overrides["go_package"] = go_package
    if go_var:
        overrides["go_var"] = go_var
    config = dataclasses.replace(config, **overrides)

    sets = load_sets_or_exit(paramsfile)
    obj = sets
    if set_name:
        try:
            obj = sets.set_by_name(set_name)
        except KeyError as exc:
            click.echo(f"Error: {exc.args[0]}", err=True)
            sys.exit(1)

    if output is None:
        click.echo(go_source(obj, config), nl=False)
        return
    try:
        save_go_code(obj, output, config)
    except CodecIOError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Wrote Go code to {output}")
