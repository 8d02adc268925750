"""paramstyle validate: lint a params file."""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path

import click

from paramstyle.cli.common import load_sets_or_exit
from paramstyle.model.diagnostic import Severity
from paramstyle.validation import validate as run_validate


@click.command()
@click.argument("paramsfile", type=click.Path(exists=True))
@click.option("--fixes/--no-fixes", default=False, help="Print a suggested fix under each finding")
def validate(paramsfile: str, fixes: bool) -> None:
    """Check PARAMSFILE for broken selectors, bad paths, duplicates and
    conflicting values inside a set.

    Exits with code 1 when any ERROR finding is reported.
    """
    sets = load_sets_or_exit(paramsfile)
    diagnostics = run_validate(sets)

    if not diagnostics:
        click.echo(f"OK: {Path(paramsfile).name} is valid (0 diagnostics)")
        return

    for diag in diagnostics:
        click.echo(str(diag))
        if fixes and diag.fix:
            click.echo(f"  fix: {diag.fix}")

    counts = Counter(d.severity for d in diagnostics)
    click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )
    if counts[Severity.ERROR]:
        sys.exit(1)
