"""Slack slash-command router."""

import asyncio
import hmac
import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request, Response

from brewbot.api.deps import get_context
from brewbot.api.schemas import SlackCommandResponse
from brewbot.core.commands.base import CommandRecord, UserIdentity
from brewbot.core.context import SharedContext

logger = logging.getLogger(__name__)

router = APIRouter()

# Never echoed back through command fields.
SECRET_FIELDS = frozenset({"token"})


@router.post("/commands", response_model=SlackCommandResponse)
async def slash_command(
    request: Request,
    command: str = Form(...),
    user_id: str = Form(...),
    user_name: str = Form(...),
    text: str = Form(""),
    token: str | None = Form(None),
    ctx: SharedContext = Depends(get_context),
):
    """
    Handle a Slack slash command and reply in the same request.

    Every form field Slack sends except the verification token is kept on the
    command record, so handlers see team, channel, trigger and app ids as-is.
    """
    expected_token = ctx.config.slack.verification_token
    if expected_token and not hmac.compare_digest(token or "", expected_token):
        logger.warning(f"Rejected slash command {command} from {user_id}: bad token")
        raise HTTPException(status_code=401, detail="Invalid verification token")

    scope = ctx.config.slack.commands.get(command)
    if scope is None:
        raise HTTPException(status_code=404, detail=f"Unknown slash command: {command}")

    form = await request.form()
    fields = {
        key: value
        for key, value in form.multi_items()
        if key not in SECRET_FIELDS and isinstance(value, str)
    }
    fields.setdefault("text", text)
    record = CommandRecord.from_text(
        text,
        scope=scope,
        user=UserIdentity(id=user_id, name=user_name),
        fields=fields,
    )

    # Handlers touch the brew store on disk; keep them off the event loop.
    loop = asyncio.get_running_loop()
    intent = await loop.run_in_executor(None, ctx.executor.execute, record)
    payload = ctx.responses.render(intent, scope)
    if payload is None:
        return Response(status_code=200)
    return payload
