"""Server CLI command for the Slack slash-command endpoint."""

import logging

import typer
import uvicorn

from brewbot.api import create_app
from brewbot.core.context import SharedContext
from brewbot.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def server_command(
    ctx: typer.Context,
) -> None:
    """Start the HTTP server answering Slack slash commands."""
    config = ctx.obj.get("config")

    # Enable console logging for server mode
    setup_logging(config, console_output=True)

    # Registry is built here, before uvicorn accepts any request
    context = SharedContext(config)

    typer.echo("Starting brewbot server...")
    typer.echo(f"Brew store: {config.store_dir}")
    typer.echo(
        "Slash commands: "
        + ", ".join(f"{cmd} ({scope.value})" for cmd, scope in config.slack.commands.items())
    )
    typer.echo("Press Ctrl+C to stop")

    logger.info(f"Serving on {config.api.host}:{config.api.port}")
    uvicorn.run(create_app(context), host=config.api.host, port=config.api.port)
