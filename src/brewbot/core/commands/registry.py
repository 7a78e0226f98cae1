# src/brewbot/core/commands/registry.py
"""Command registry mapping (name, scope) to handlers."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator

from brewbot.core.commands.base import (
    DEFAULT_SCOPE,
    HandlerDescriptor,
    HandlerFn,
    Scope,
)
from brewbot.core.exceptions import DuplicateRegistrationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandlerDeclaration:
    """One explicit registration statement."""

    fn: HandlerFn
    name: str | None = None
    scope: Scope | None = None

    def to_descriptor(self) -> HandlerDescriptor:
        name = self.fn.__name__ if self.name is None else self.name
        return HandlerDescriptor(
            name=name.lower(),
            scope=self.scope or DEFAULT_SCOPE,
            fn=self.fn,
        )


def handler(
    fn: HandlerFn, name: str | None = None, scope: Scope | None = None
) -> HandlerDeclaration:
    """
    Declare a handler for registration.

    Args:
        fn: Handler function taking a CommandContext
        name: Command name; defaults to the function name. "" is the bare command.
        scope: Reply scope; defaults to DEFAULT_SCOPE

    Returns:
        HandlerDeclaration to pass to HandlerRegistry.build()
    """
    return HandlerDeclaration(fn=fn, name=name, scope=scope)


class HandlerRegistry:
    """Read-only table of command handlers keyed by (name, scope)."""

    def __init__(self, descriptors: Iterable[HandlerDescriptor] = ()) -> None:
        table: dict[tuple[str, Scope], HandlerDescriptor] = {}
        for descriptor in descriptors:
            existing = table.get(descriptor.key)
            if existing is not None:
                raise DuplicateRegistrationError(
                    f"Command '{descriptor.name}' ({descriptor.scope.value}) is "
                    f"registered twice: {existing.qualname} and {descriptor.qualname}"
                )
            table[descriptor.key] = descriptor
        self._handlers = MappingProxyType(table)

    @classmethod
    def build(cls, declarations: Iterable[HandlerDeclaration]) -> "HandlerRegistry":
        """
        Build a registry from handler declarations.

        Raises:
            DuplicateRegistrationError: If two declarations share (name, scope)
        """
        registry = cls(decl.to_descriptor() for decl in declarations)
        logger.info(f"Registered {len(registry)} command handler(s)")
        return registry

    def resolve(self, name: str, scope: Scope) -> HandlerDescriptor | None:
        """Return the handler registered for exactly (name, scope), or None."""
        return self._handlers.get((name, scope))

    def list_handlers(self) -> list[HandlerDescriptor]:
        """All registered handlers in registration order."""
        return list(self._handlers.values())

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def __iter__(self) -> Iterator[HandlerDescriptor]:
        return iter(self._handlers.values())

    @classmethod
    def with_builtins(cls) -> "HandlerRegistry":
        """Create registry with the brew handlers registered."""
        from brewbot.core.commands.handlers import BREW_HANDLERS

        return cls.build(BREW_HANDLERS)
