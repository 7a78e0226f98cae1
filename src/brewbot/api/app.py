"""FastAPI application factory."""

from fastapi import FastAPI

from brewbot.api.routers import commands, slack
from brewbot.core.context import SharedContext


def create_app(context: SharedContext) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Brewbot API",
        description="Slack slash-command endpoint for brewbot",
        version="0.1.0",
    )
    app.state.context = context

    app.include_router(slack.router, prefix="/slack", tags=["slack"])
    app.include_router(commands.router, prefix="/commands", tags=["commands"])

    return app
