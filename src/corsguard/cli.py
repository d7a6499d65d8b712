"""
This module defines the command-line interface (CLI) for corsguard.

It uses the `click` library for commands and `rich` for output: running the
HTTP server, showing the effective CORS policy, and checking which headers a
given request would receive.
"""

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import get_config
from .headers import HEADER_VARY
from .interceptor import CorsInterceptor

# Initialize Rich console for pretty output
console = Console()


@click.group()
@click.version_option(__version__)
def main() -> None:
    """corsguard - Cross-Origin Resource Sharing interceptor."""
    pass


@main.command()
@click.option("--host", default=None, help="Host to bind server (defaults to config)")
@click.option("--port", default=None, type=int, help="Port to bind server (defaults to config)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the corsguard HTTP server."""
    try:
        import uvicorn
    except ImportError:
        console.print("[red]Error: uvicorn not installed. Run: pip install uvicorn[/red]")
        return

    config = get_config()
    host = host or config.server_host
    port = port or config.server_port

    console.print(f"[green]Starting corsguard server at http://{host}:{port}[/green]")
    console.print(f"[dim]• Allowed origins: {', '.join(config.cors.allowed_origins) or '(none)'}[/dim]")
    console.print(f"[dim]• API documentation available at http://{host}:{port}/docs[/dim]")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]\n")

    try:
        uvicorn.run("corsguard.server.app:create_app", factory=True, host=host, port=port, reload=reload, log_level="info")
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped[/yellow]")


@main.command()
def policy() -> None:
    """Show the effective CORS policy."""
    cors_policy = get_config().policy()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Option", style="bold")
    table.add_column("Value")

    table.add_row("Allowed origins", ", ".join(cors_policy.allowed_origins) or "-")
    table.add_row("Allowed methods", cors_policy.joined_allowed_methods or "-")
    table.add_row("Allowed headers", cors_policy.joined_allowed_headers or "-")
    table.add_row("Exposed headers", cors_policy.joined_exposed_headers or "-")
    table.add_row("Allow credentials", "yes" if cors_policy.allow_credentials else "no")
    table.add_row("Max age", f"{cors_policy.allow_max_age}s" if cors_policy.allow_max_age > 0 else "disabled")

    console.print(table)


@main.command()
@click.option("--method", "-m", default="GET", help="Request method (exact, case-sensitive)")
@click.option("--origin", "-o", default="", help="Request Origin header")
@click.option("--vary", default=None, help="Vary header already set on the response")
def check(method: str, origin: str, vary: str | None) -> None:
    """Show the CORS headers a request would receive."""
    interceptor = CorsInterceptor(get_config().policy())

    headers: dict[str, str] = {}
    if vary:
        headers[HEADER_VARY] = vary

    if not interceptor.apply(method, origin, headers):
        console.print(f"[yellow]Origin '{origin}' is not allowed; no CORS headers are added[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Header", style="cyan")
    table.add_column("Value")
    for name, value in headers.items():
        table.add_row(name, value)

    console.print(table)


if __name__ == "__main__":
    main()
