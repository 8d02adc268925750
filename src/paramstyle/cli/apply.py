"""CLI command: paramstyle apply -- style JSON-described targets with a set."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from paramstyle.apply import apply_set
from paramstyle.cli.common import config_from, load_sets_or_exit
from paramstyle.errors import CodecError
from paramstyle.target import all_params, records_from_list


@click.command()
@click.argument("paramsfile", type=click.Path(exists=True))
@click.argument("targetsfile", type=click.Path(exists=True))
@click.option("--set", "set_name", default=None, help="Set to apply (default: the first set)")
@click.option(
    "--sheet",
    "sheet_names",
    multiple=True,
    help="Sheet to apply, in the order given (repeatable; default: all sheets)",
)
@click.option("--report/--no-report", default=None, help="Print a line for every param set")
@click.option("--list-params", is_flag=True, help="List every field of each target afterwards")
@click.option("-o", "--output", type=click.Path(), default=None, help="Write styled targets to a file")
@click.pass_context
def apply(
    ctx: click.Context,
    paramsfile: str,
    targetsfile: str,
    set_name: str | None,
    sheet_names: tuple[str, ...],
    report: bool | None,
    list_params: bool,
    output: str | None,
) -> None:
    """Apply a params set to the targets listed in TARGETSFILE.

    TARGETSFILE is a JSON list of objects with "type", "name", optional
    "class" and a nested "fields" object.  Exits with code 1 if any param
    could not be set.
    """
    config = config_from(ctx)
    sets = load_sets_or_exit(paramsfile)

    try:
        targets = records_from_list(json.loads(Path(targetsfile).read_text(encoding="utf-8")))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, CodecError) as exc:
        click.echo(f"Targets error: {exc}", err=True)
        sys.exit(1)

    try:
        pset = sets.set_by_name(set_name) if set_name else sets[0]
    except (KeyError, IndexError):
        click.echo(f"Error: set {set_name or '(first)'} not found", err=True)
        sys.exit(1)

    order = list(sheet_names) or None
    try:
        result = apply_set(
            pset,
            targets,
            order=order,
            report=config.report if report is None else report,
        )
    except KeyError as exc:
        click.echo(f"Error: {exc.args[0]}", err=True)
        sys.exit(1)

    for line in result.messages:
        click.echo(line)

    styled = json.dumps([t.to_dict() for t in targets], indent=config.json_indent)
    if output:
        try:
            Path(output).write_text(styled + "\n", encoding="utf-8")
        except OSError as exc:
            click.echo(f"Error: cannot write {output}: {exc}", err=True)
            sys.exit(1)
        click.echo(f"Wrote {len(targets)} target(s) to {output}")
    elif list_params:
        for target in targets:
            click.echo(f"{target.type_name} {target.name}:")
            for line in all_params(target).splitlines():
                click.echo(f"  {line}")
    else:
        click.echo(styled)

    if result.errors:
        for error in result.errors:
            click.echo(f"Failed: {error}", err=True)
        sys.exit(1)
