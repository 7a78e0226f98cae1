"""Custom exceptions for brewbot."""


class BrewBotError(Exception):
    """Base class for brewbot errors."""

    pass


class DuplicateRegistrationError(BrewBotError):
    """Raised at startup when two handlers resolve to the same (name, scope)."""

    pass


class InvalidArgument(BrewBotError):
    """Raised by a handler when the command argument cannot be used.

    The message is meant for the user and is rendered as a normal reply.
    """

    pass


class HandlerError(BrewBotError):
    """Raised when a handler body fails with an unexpected exception."""

    def __init__(self, command: str, scope: str):
        self.command = command
        self.scope = scope
        super().__init__(f"Handler for command '{command}' ({scope}) failed")
