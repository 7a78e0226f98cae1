"""Routes command records to registered handlers."""

import logging
from typing import Callable

from brewbot.core.commands.base import CommandContext, CommandRecord, ResponseIntent
from brewbot.core.commands.registry import HandlerRegistry
from brewbot.core.exceptions import HandlerError, InvalidArgument

logger = logging.getLogger(__name__)

ContextFactory = Callable[[CommandRecord], CommandContext]
UnknownCommandPolicy = Callable[[CommandRecord], ResponseIntent | None]


class Dispatcher:
    """Turns one CommandRecord into at most one ResponseIntent."""

    def __init__(
        self,
        registry: HandlerRegistry,
        context_factory: ContextFactory,
        unknown_command: UnknownCommandPolicy,
    ):
        """
        Initialize Dispatcher.

        Args:
            registry: Fully built handler registry
            context_factory: Builds a fresh CommandContext for a record
            unknown_command: Reply policy for records with no handler
        """
        self.registry = registry
        self._context_factory = context_factory
        self._unknown_command = unknown_command

    def dispatch(self, record: CommandRecord) -> ResponseIntent | None:
        """
        Invoke the handler registered for the record's (name, scope).

        Returns:
            The handler's ResponseIntent unchanged (None means no reply), or the
            unknown-command reply when nothing is registered for the key

        Raises:
            InvalidArgument: Passed through unchanged from the handler
            HandlerError: Any other exception raised while building the context
                or running the handler body
        """
        descriptor = self.registry.resolve(record.name, record.scope)
        if descriptor is None:
            logger.info(
                f"No handler for '{record.name}' ({record.scope.value}) "
                f"from {record.user.id}"
            )
            return self._unknown_command(record)

        logger.debug(f"Dispatching '{record.name}' to {descriptor.qualname}")
        try:
            ctx = self._context_factory(record)
            return descriptor.fn(ctx)
        except InvalidArgument:
            raise
        except Exception as e:
            raise HandlerError(record.name, record.scope.value) from e
