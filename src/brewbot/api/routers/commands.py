"""Routing table router."""

from fastapi import APIRouter, Depends

from brewbot.api.deps import get_context
from brewbot.api.schemas import HandlerInfo
from brewbot.core.context import SharedContext

router = APIRouter()


@router.get("", response_model=list[HandlerInfo])
def list_commands(ctx: SharedContext = Depends(get_context)) -> list[HandlerInfo]:
    """List registered command handlers."""
    return [
        HandlerInfo.from_descriptor(d) for d in ctx.command_registry.list_handlers()
    ]
