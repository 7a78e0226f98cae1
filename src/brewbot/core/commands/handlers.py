"""Built-in brew command handlers."""

import logging
import re
from datetime import datetime, timedelta
from typing import Iterable

from brewbot.core.brew_store import Brew
from brewbot.core.commands.base import CommandContext, ResponseIntent, Scope
from brewbot.core.commands.registry import handler
from brewbot.core.exceptions import InvalidArgument

logger = logging.getLogger(__name__)

RECENT_LIMIT = 20
TODAY_WINDOW = timedelta(hours=12)

_INTEGER = re.compile(r"[+-]?\d+")


def parse_int(text: str) -> int:
    """Parse a command argument as a base-10 integer.

    Raises:
        InvalidArgument: With the user-facing message for bad input
    """
    if not _INTEGER.fullmatch(text):
        raise InvalidArgument(f"({text}) is not a valid number.")
    return int(text)


def join_lines(lines: Iterable[str], empty: str) -> str:
    """Join lines with newlines, or return ``empty`` when there are none."""
    collected = list(lines)
    if not collected:
        return empty
    return "\n".join(collected)


def format_brew_date(when: datetime, ctx: CommandContext) -> str:
    """Format like "Sun, Jan 5 @ 9:05 AM" in the context's time zone."""
    local = when.astimezone(ctx.tz)
    hour = local.hour % 12 or 12
    return f"{local:%a, %b} {local.day} @ {hour}:{local:%M %p}"


def pretty(brew: Brew, ctx: CommandContext) -> str:
    state = "all gone" if brew.gone else "still available"
    return (
        f"{brew.name} was brewed by {brew.brewed_by} on "
        f"{format_brew_date(brew.brewed_at, ctx)}, and is {state}."
    )


def show_help(ctx: CommandContext) -> ResponseIntent:
    logger.info("Help")
    return ctx.reply(
        "---commands---\n"
        "> -- A blank will show you if there is any coffee available.\n"
        "> *brew {Type of coffee you brewed.}* -- Adds a fresh pot of coffee.\n"
        "> *today* -- List all the coffee that was brewed today.\n"
        f"> *gone* -- Sets the current pots to gone, and lets {ctx.admin.name} "
        "know to make another pot =)\n"
        "> *last {number}* -- Lists the most recent brews, only to you.\n"
    )


def today(ctx: CommandContext) -> ResponseIntent:
    logger.info("Getting today's brews")

    since = ctx.clock() - TODAY_WINDOW
    brews = [b for b in ctx.store.find_recent(RECENT_LIMIT) if b.brewed_at > since]
    if not brews:
        return ctx.reply(f"No coffee brewed yet, {ctx.admin.ref} go make some!")

    return ctx.reply("\n".join(pretty(b, ctx) for b in brews))


def brew_status(ctx: CommandContext) -> ResponseIntent:
    """Bare command: how long ago the last pot was brewed."""
    logger.info("Getting status")

    recent = ctx.store.find_recent(1)
    if not recent:
        return ctx.reply("No coffee brewed yet, go make some!")

    last_brew = recent[0]
    minutes = int(ctx.clock().timestamp() // 60) - int(
        last_brew.brewed_at.timestamp() // 60
    )
    return ctx.reply(
        f"{last_brew.name} was brewed {minutes} minutes ago by {last_brew.brewed_by}."
    )


def brew(ctx: CommandContext) -> ResponseIntent:
    logger.info("Brewing")

    brew_name = ctx.argument
    if not brew_name:
        return ctx.reply(
            "Include the name of the coffee you brewed! "
            "Example, /coffee brew Blue Heeler"
        )

    ctx.store.save(Brew(name=brew_name, brewed_by=ctx.user.name, brewed_at=ctx.clock()))
    return ctx.reply(f"{ctx.user.ref} brewed a pot of {brew_name}.")


def brew_private(ctx: CommandContext) -> ResponseIntent:
    # Acknowledgment only; brewing is recorded by the public command.
    logger.info("Brewing-private")
    return ctx.reply(f"You truly are a brew master {ctx.user.ref}.")


def gone(ctx: CommandContext) -> ResponseIntent:
    logger.info("Gone")

    for b in ctx.store.find_open():
        ctx.store.save(b.model_copy(update={"gone": True}))

    return ctx.reply(f"{ctx.admin.ref}, go make some more coffee!")


def gone_private(ctx: CommandContext) -> ResponseIntent:
    # Does not clear anything, see gone().
    logger.info("Gone-private")
    return ctx.reply("The coffee is gone, this is unfortunate.")


def debug(ctx: CommandContext) -> ResponseIntent:
    logger.info("Debugging")
    lines = (f"{key} : {value}" for key, value in ctx.record.fields.items())
    return ctx.reply(join_lines(lines, empty="No command fields."))


def last(ctx: CommandContext) -> ResponseIntent:
    """
    List the N most recent brews (at most 20).

    An empty argument is not a number, so it gets the same reply as any
    other unparseable input.
    """
    logger.info(f"Retrieving last brews: {ctx.argument}")

    try:
        count = parse_int(ctx.argument)
        if count < 0:
            raise InvalidArgument(f"({ctx.argument}) is not a valid number.")
    except InvalidArgument as e:
        return ctx.reply(str(e))

    brews = ctx.store.find_recent(RECENT_LIMIT)[:count]
    return ctx.reply(join_lines((pretty(b, ctx) for b in brews), empty="No brews found."))


BREW_HANDLERS = [
    handler(show_help, name="help"),
    handler(today),
    handler(brew_status, name=""),
    handler(brew, scope=Scope.PUBLIC),
    handler(brew_private, name="brew"),
    handler(gone, scope=Scope.PUBLIC),
    handler(gone_private, name="gone"),
    handler(debug),
    handler(last, scope=Scope.EPHEMERAL),
]
