"""CLI commands for inspecting the legislator roster and officeholder index."""

from typing import Annotated

import typer

from rep_finder.core.config import get_settings
from rep_finder.lib.roster import OfficeholderIndex, RosterLoadError, build_index, load_roster

roster_app = typer.Typer()

FileOption = Annotated[
    str | None,
    typer.Option("--file", help="Roster YAML path (defaults to LEGISLATORS_FILE)"),
]


def _load_index(path: str | None) -> OfficeholderIndex:
    roster_path = path or get_settings().legislators_file
    try:
        return build_index(load_roster(roster_path))
    except RosterLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@roster_app.command("check")
def check(file: FileOption = None) -> None:
    """Load the roster and report how many House seats are indexed."""
    index = _load_index(file)
    states = {entry.state for entry in index.values()}
    typer.echo(f"Indexed {len(index)} House seats across {len(states)} states/territories")


@roster_app.command("show")
def show(
    key: Annotated[str, typer.Argument(help="District key, e.g. CA-12")],
    file: FileOption = None,
) -> None:
    """Show the officeholder indexed for a district key."""
    index = _load_index(file)
    entry = index.get(key.strip().upper())
    if entry is None:
        typer.echo(f"No officeholder indexed for {key}")
        raise typer.Exit(code=1)

    typer.echo(
        f"{entry.state}-{entry.district}: {entry.name}\n"
        f"  Party: {entry.party or '-'}\n"
        f"  Phone: {entry.phone or '-'}\n"
        f"  URL: {entry.url or '-'}\n"
        f"  Bioguide: {entry.bioguide or '-'}"
    )
