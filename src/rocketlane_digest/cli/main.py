"""
CLI interface for Rocketlane Digest.
"""

from typing import Optional

import click
import uvicorn
from loguru import logger
from rich.console import Console
from rich.table import Table

from rocketlane_digest.config.settings import settings
from rocketlane_digest.core.logging import setup_logging
from rocketlane_digest.services.notifier import EmailNotifier

console = Console()


@click.group()
@click.version_option(version=settings.app_version)
def app():
    """Rocketlane Digest CLI."""
    pass


@app.command()
@click.option("--host", default=None, help="Host to bind to (defaults to WEBHOOK_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind to (defaults to WEBHOOK_PORT)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Start the webhook server."""
    setup_logging(log_level=settings.log.level, enable_json=settings.log.json)

    host = host or settings.webhook.host
    port = port or settings.webhook.port
    logger.info(f"Starting webhook server on {host}:{port}")

    uvicorn.run(
        "rocketlane_digest.api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log.level.lower(),
        log_config=None,
    )


@app.command("check-config")
def check_config():
    """Show which settings are configured. Exits with status 1 when any is missing."""
    report = settings.validate_configuration()

    table = Table(title=f"{settings.app_name} configuration ({report['environment']})")
    table.add_column("Setting", style="cyan")
    table.add_column("Status")

    for name, present in settings.configuration_status().items():
        table.add_row(name, "[green]set[/green]" if present else "[red]missing[/red]")

    table.add_row("GEMINI_MODEL_NAME", settings.gemini.model_name)
    table.add_row("SMTP", f"{settings.smtp.host or '-'}:{settings.smtp.port} "
                          f"({'SSL' if settings.smtp.use_ssl else 'STARTTLS'})")
    table.add_row("WEBHOOK_PATH", settings.webhook.path)

    console.print(table)

    for warning in report["warnings"]:
        console.print(f"[yellow]Warning:[/yellow] {warning}")

    if not report["valid"]:
        for error in report["errors"]:
            console.print(f"[red]Error:[/red] {error}")
        raise click.exceptions.Exit(1)

    console.print("[green]Configuration is complete[/green]")


@app.command("preview-email")
@click.option("--event", default="task.completed", show_default=True, help="Event type tag")
@click.argument("summary")
def preview_email(event: str, summary: str):
    """Render the digest email for SUMMARY without sending it."""
    notifier = EmailNotifier(settings.smtp, settings.email)
    content = notifier.build_email(event, summary)

    console.print(f"[bold]From:[/bold] {content.sender or '-'}")
    console.print(f"[bold]To:[/bold] {content.recipient or '-'}")
    console.print(f"[bold]Subject:[/bold] {content.subject}")
    click.echo(content.html)


def main():
    app()


if __name__ == "__main__":
    main()
