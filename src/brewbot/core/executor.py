"""Command executor applying the caller-side error policy around dispatch."""

import logging

from brewbot.core.commands.base import CommandRecord, ResponseIntent
from brewbot.core.commands.dispatcher import Dispatcher
from brewbot.core.exceptions import HandlerError, InvalidArgument
from brewbot.core.responses import ResponseBuilder

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Runs commands for a transport and turns failures into replies."""

    def __init__(self, dispatcher: Dispatcher, responses: ResponseBuilder):
        self.dispatcher = dispatcher
        self.responses = responses

    def execute(self, record: CommandRecord) -> ResponseIntent | None:
        """
        Dispatch a command, reporting failures to the user.

        Args:
            record: Parsed inbound command

        Returns:
            Reply to send, or None when the handler chose not to reply
        """
        logger.info(
            f"Command '{record.name}' ({record.scope.value}) from {record.user.id}"
        )
        try:
            return self.dispatcher.dispatch(record)
        except InvalidArgument as e:
            logger.info(f"Invalid argument for '{record.name}': {e}")
            return self.responses.build_text_response(str(e))
        except HandlerError as e:
            logger.exception(f"Error running command '{e.command}' ({e.scope})")
            label = f"`{e.command}`" if e.command else "the status command"
            return self.responses.build_text_response(
                f"Sorry, something went wrong running {label}."
            )
