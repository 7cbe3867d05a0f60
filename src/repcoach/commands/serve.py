"""Web server command."""

import click

from ..config import get_settings
from .base import ensure_initialized


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: REPCOACH_HOST or 127.0.0.1)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: REPCOACH_PORT or 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the JSON API server.

    Examples:

        # Start on default port (8000)
        repcoach serve

        # Expose to network (all interfaces)
        repcoach serve --host 0.0.0.0 --port 3000

        # Development mode with auto-reload
        repcoach serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    click.echo()
    click.echo(click.style("Starting repcoach API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "repcoach.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=settings.log_level.lower(),
    )
