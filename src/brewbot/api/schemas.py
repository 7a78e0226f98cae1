"""Pydantic schemas for API request/response models."""

from typing import Literal

from pydantic import BaseModel

from brewbot.core.commands.base import HandlerDescriptor, Scope


class HandlerInfo(BaseModel):
    """One row of the routing table."""

    name: str
    scope: Scope
    handler: str

    @classmethod
    def from_descriptor(cls, descriptor: HandlerDescriptor) -> "HandlerInfo":
        return cls(
            name=descriptor.name,
            scope=descriptor.scope,
            handler=descriptor.qualname,
        )


class SlackCommandResponse(BaseModel):
    """Immediate reply body for a Slack slash command."""

    response_type: Literal["in_channel", "ephemeral"]
    text: str
