from brewbot.core.brew_store import BrewStore
from brewbot.core.commands.base import (
    CommandContext,
    CommandRecord,
    ResponseIntent,
    UserIdentity,
)
from brewbot.core.commands.dispatcher import Dispatcher
from brewbot.core.commands.registry import HandlerRegistry
from brewbot.core.executor import CommandExecutor
from brewbot.core.responses import SlackResponseBuilder
from brewbot.utils.config import Config


class SharedContext:
    """Process-wide wiring. The registry is complete before any dispatch."""

    config: Config
    store: BrewStore
    responses: SlackResponseBuilder
    admin: UserIdentity
    command_registry: HandlerRegistry
    dispatcher: Dispatcher
    executor: CommandExecutor

    def __init__(self, config: Config, registry: HandlerRegistry | None = None):
        self.config = config
        self.store = BrewStore.from_config(config)
        self.responses = SlackResponseBuilder()
        self.admin = UserIdentity(id=config.admin.id, name=config.admin.username)
        if registry is None:
            registry = HandlerRegistry.with_builtins()
        self.command_registry = registry
        self.dispatcher = Dispatcher(
            self.command_registry,
            context_factory=self.new_command_context,
            unknown_command=self.unknown_command,
        )
        self.executor = CommandExecutor(self.dispatcher, self.responses)

    def new_command_context(self, record: CommandRecord) -> CommandContext:
        return CommandContext(
            record=record,
            store=self.store,
            responses=self.responses,
            admin=self.admin,
            tz=self.config.tz,
        )

    def unknown_command(self, record: CommandRecord) -> ResponseIntent:
        return self.responses.build_text_response(
            f"Unknown command `{record.name}`. Try `help`."
        )
