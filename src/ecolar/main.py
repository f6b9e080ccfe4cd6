"""
EcoLar - CLI Entry Point.

Usage:
    ecolar serve             Run the API server
    ecolar status USER_ID    Show a user's onboarding status
    ecolar health            Check configuration and database access
    ecolar version           Show version information
"""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="ecolar",
    help="EcoLar - household sustainability profile service.",
    add_completion=False,
)
console = Console()


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload for development"),
) -> None:
    """Run the EcoLar API with uvicorn."""
    import os

    import uvicorn

    from ecolar.config import configure_logging

    # Hosting platforms set PORT
    actual_port = int(os.environ.get("PORT", port))

    configure_logging()
    console.print("\n[bold green]EcoLar API[/bold green]")
    console.print(f"Starting server on http://localhost:{actual_port}")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        "ecolar.web.app:create_app",
        factory=True,
        host=host,
        port=actual_port,
        reload=reload,
    )


@app.command()
def status(user_id: str = typer.Argument(..., help="Supabase user id")) -> None:
    """Show whether a user has finished onboarding."""
    from ecolar.db.client import get_service_client
    from ecolar.db.profiles import SupabaseProfileStore
    from onboarding.errors import ProfileLookupError

    store = SupabaseProfileStore(client=get_service_client())
    try:
        row = asyncio.run(store.fetch_onboarding_status(user_id))
    except ProfileLookupError as e:
        console.print(f"[red]Lookup failed:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"Onboarding - {user_id}")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("profile row", "yes" if row is not None else "no")
    table.add_row(
        "onboarding_completed",
        str(bool(row and row.get("onboarding_completed"))),
    )
    console.print(table)


@app.command()
def health() -> None:
    """Check configuration and database connectivity."""
    from pydantic import ValidationError

    from ecolar.config import get_settings

    console.print("[bold]EcoLar Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("[green]✓[/green] Configuration loaded")
        console.print(f"  Environment: {settings.ecolar_env}")
        console.print(f"  Profile table: {settings.user_infos_table}")
    except ValidationError as e:
        console.print(f"[red]✗[/red] Configuration error: {e}")
        raise typer.Exit(1)

    from ecolar.db.client import get_service_client

    try:
        client = get_service_client()
        client.table(settings.user_infos_table).select("user_id").limit(1).execute()
        console.print("[green]✓[/green] Database connection OK")
    except Exception as e:
        console.print(f"[red]✗[/red] Database error: {e}")
        raise typer.Exit(1)

    console.print("\n[green]All systems operational![/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from ecolar import __version__

    console.print(f"EcoLar version {__version__}")


if __name__ == "__main__":
    app()
