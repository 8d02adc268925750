"""CLI command: paramstyle show -- display the structure of a params file."""

from __future__ import annotations

from pathlib import Path

import click

from paramstyle.cli.common import load_sets_or_exit


@click.command()
@click.argument("paramsfile", type=click.Path(exists=True))
@click.option("--params/--no-params", "show_params", default=False, help="List every param value")
def show(paramsfile: str, show_params: bool) -> None:
    """Load a params file and display its sets, sheets and selectors."""
    sets = load_sets_or_exit(paramsfile)

    click.echo(f"File: {Path(paramsfile).name}")
    click.echo(f"Sets: {len(sets)}")
    for pset in sets:
        click.echo()
        header = f"Set {pset.name}"
        if pset.desc:
            header += f' desc="{pset.desc}"'
        click.echo(header)
        for sheet_name, sheet in pset.sheets.items():
            click.echo(f"  Sheet {sheet_name} ({len(sheet)} selector(s))")
            for sel in sheet:
                parts = [f"    {sel.sel}", f"params={len(sel.params)}"]
                if sel.desc:
                    desc = sel.desc[:50] + "..." if len(sel.desc) > 50 else sel.desc
                    parts.append(f'desc="{desc}"')
                click.echo("  ".join(parts))
                if show_params:
                    for path in sorted(sel.params):
                        click.echo(f"      {path} = {sel.params[path]}")
