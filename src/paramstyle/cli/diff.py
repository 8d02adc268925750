"""CLI command: paramstyle diff -- report params set to conflicting values."""

from __future__ import annotations

import json
import sys

import click

from paramstyle.cli.common import load_sets_or_exit
from paramstyle.diff import (
    Conflict,
    diffs_across_sets,
    diffs_first_vs_rest,
    diffs_within_named_set,
    diffs_within_set,
)


@click.command()
@click.argument("paramsfile", type=click.Path(exists=True))
@click.option(
    "--mode",
    type=click.Choice(["first", "all", "within"]),
    default="first",
    show_default=True,
    help="first: each set vs. the first; all: every pair of sets; within: inside each set",
)
@click.option("--set", "set_name", default=None, help="Restrict --mode within to one set")
@click.option("--json", "as_json", is_flag=True, help="Print conflicts as JSON records")
@click.option("--fail-on-conflict", is_flag=True, help="Exit with code 1 if any conflict is found")
def diff(paramsfile: str, mode: str, set_name: str | None, as_json: bool, fail_on_conflict: bool) -> None:
    """Report where the same param path is set to different values."""
    sets = load_sets_or_exit(paramsfile)

    conflicts: list[Conflict]
    if mode == "first":
        conflicts = diffs_first_vs_rest(sets)
    elif mode == "all":
        conflicts = diffs_across_sets(sets)
    elif set_name is not None:
        try:
            conflicts = diffs_within_named_set(sets, set_name)
        except KeyError as exc:
            click.echo(f"Error: {exc.args[0]}", err=True)
            sys.exit(1)
    else:
        conflicts = [c for pset in sets for c in diffs_within_set(pset)]

    if as_json:
        click.echo(json.dumps([c.to_dict() for c in conflicts], indent=2))
    elif not conflicts:
        click.echo("No conflicts found")
    else:
        for conflict in conflicts:
            click.echo(str(conflict))
        click.echo()
        click.echo(f"{len(conflicts)} conflict(s)")

    if fail_on_conflict and conflicts:
        sys.exit(1)
