"""Operational CLI commands."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from sqlalchemy.engine import make_url

from src.phonebook.runtime.context import get_config

console = Console()

APP_IMPORT_PATH = "src.phonebook.api.http.app:app"


def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to app.host)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to app.port)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the contacts API server.
    """
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Phonebook Contacts API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        APP_IMPORT_PATH,
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )


def init_db(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
) -> None:
    """
    🗄️  Create the contacts table in the configured database.
    """
    from src.phonebook.core.services import DbManageService, DbSessionService

    db_manage_service = DbManageService(DbSessionService().engine)
    if drop:
        typer.confirm("This deletes every stored contact. Continue?", abort=True)
        db_manage_service.drop_all()
    db_manage_service.create_all()
    console.print("[green]✅ Database initialized[/green]")


def show_config() -> None:
    """
    ⚙️  Show the effective configuration.
    """
    config = get_config()
    table = Table(title="Phonebook configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("environment", config.app.environment)
    table.add_row("listen", f"{config.app.host}:{config.app.port}")
    table.add_row(
        "database.url", make_url(config.database.url).render_as_string(hide_password=True)
    )
    table.add_row(
        "database.password",
        "[dim]not set[/dim]" if not config.database.password else "********",
    )
    table.add_row("logging.level", config.logging.level)
    table.add_row("logging.file", config.logging.file or "[dim]console only[/dim]")
    table.add_row("contacts.default_page_size", str(config.contacts.default_page_size))
    table.add_row("contacts.max_page_size", str(config.contacts.max_page_size))
    table.add_row(
        "contacts.phone_default_region",
        config.contacts.phone_default_region or "[dim]none (+country required)[/dim]",
    )
    console.print(table)
