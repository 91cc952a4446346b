"""Typer CLI root application with serve and lookup commands."""

import asyncio

import typer

from rep_finder.core.config import get_settings
from rep_finder.core.logging import setup_logging

app = typer.Typer(name="rep-finder", help="U.S. House representative lookup by ZIP code")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=settings.log_json)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(3000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "rep_finder.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def lookup(zip_code: str = typer.Argument(..., metavar="ZIP", help="Five-digit ZIP code")) -> None:
    """Resolve a ZIP code to its House representative(s)."""
    from rep_finder.lib.roster import RosterLoadError
    from rep_finder.services.representative_service import (
        RepresentativeLookupError,
        lookup_representatives,
        reload_index,
    )

    settings = get_settings()
    try:
        reload_index(settings.legislators_file)
        result = asyncio.run(lookup_representatives(zip_code, settings))
    except RosterLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    except RepresentativeLookupError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"ZIP {result.zip_code} (lat {result.latitude}, lon {result.longitude})")
    for rep in result.representatives:
        if rep.missing:
            typer.echo(f"  {rep.state}-{rep.district}: no representative on file")
        else:
            typer.echo(f"  {rep.state}-{rep.district}: {rep.name} ({rep.party or '?'}) {rep.phone or ''}".rstrip())


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from rep_finder.cli.roster_cmd import roster_app

    app.add_typer(roster_app, name="roster", help="Legislator roster commands")


_register_subcommands()
