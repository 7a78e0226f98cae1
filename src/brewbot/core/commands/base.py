"""Value types shared by the command registry, dispatcher and handlers."""

from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

if TYPE_CHECKING:
    from brewbot.core.brew_store import BrewRepository
    from brewbot.core.responses import ResponseBuilder


class Scope(str, Enum):
    """Who sees the reply to a command."""

    PUBLIC = "public"
    PRIVATE = "private"
    EPHEMERAL = "ephemeral"


DEFAULT_SCOPE = Scope.PRIVATE


@dataclass(frozen=True)
class UserIdentity:
    """A platform user."""

    id: str
    name: str

    @property
    def ref(self) -> str:
        """Slack mention markup for this user."""
        return f"<@{self.id}|{self.name}>"


@dataclass(frozen=True)
class CommandRecord:
    """A parsed inbound command."""

    name: str
    scope: Scope
    argument_text: str
    user: UserIdentity
    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def from_text(
        cls,
        text: str,
        scope: Scope,
        user: UserIdentity,
        fields: Mapping[str, str] | None = None,
    ) -> "CommandRecord":
        """
        Split raw command text into name and argument.

        Args:
            text: Text after the slash command (e.g., "brew Blue Heeler")
            scope: Scope chosen by the transport
            user: Invoking user
            fields: Raw payload fields received by the transport

        Returns:
            CommandRecord with a lower-cased name ("" for blank text)
        """
        parts = text.split(None, 1)
        name = parts[0].lower() if parts else ""
        argument = parts[1].strip() if len(parts) > 1 else ""
        return cls(
            name=name,
            scope=scope,
            argument_text=argument,
            user=user,
            fields=fields or {},
        )


@dataclass(frozen=True)
class ResponseIntent:
    """Result of executing a command handler."""

    text: str


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CommandContext:
    """Everything a handler may use for one dispatch. Built fresh per call."""

    record: CommandRecord
    store: "BrewRepository"
    responses: "ResponseBuilder"
    admin: UserIdentity
    clock: Callable[[], datetime] = _utcnow
    tz: tzinfo = timezone.utc

    @property
    def user(self) -> UserIdentity:
        return self.record.user

    @property
    def argument(self) -> str:
        return self.record.argument_text

    def reply(self, text: str) -> ResponseIntent:
        """Shortcut for ``self.responses.build_text_response(text)``."""
        return self.responses.build_text_response(text)


HandlerFn = Callable[[CommandContext], ResponseIntent | None]


@dataclass(frozen=True)
class HandlerDescriptor:
    """A registered handler and the key it answers to."""

    name: str
    scope: Scope
    fn: HandlerFn

    @property
    def key(self) -> tuple[str, Scope]:
        return (self.name, self.scope)

    @property
    def qualname(self) -> str:
        return getattr(self.fn, "__qualname__", repr(self.fn))
