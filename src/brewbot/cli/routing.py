"""CLI commands for inspecting and exercising the command routing table."""

import typer
from rich.console import Console
from rich.table import Table

from brewbot.core.commands.base import CommandRecord, Scope, UserIdentity
from brewbot.core.context import SharedContext

console = Console()


def commands_command(ctx: typer.Context) -> None:
    """Print every registered (name, scope) and its handler."""
    context = SharedContext(ctx.obj["config"])

    table = Table(title="Commands")
    table.add_column("Name", style="cyan")
    table.add_column("Scope")
    table.add_column("Handler", style="dim")

    for descriptor in context.command_registry.list_handlers():
        table.add_row(
            descriptor.name or "(blank)", descriptor.scope.value, descriptor.qualname
        )

    console.print(table)


def run_command(
    ctx: typer.Context, text: str, scope: Scope, user_id: str, user_name: str
) -> None:
    """Dispatch one command through the same path the server uses."""
    context = SharedContext(ctx.obj["config"])
    record = CommandRecord.from_text(
        text,
        scope=scope,
        user=UserIdentity(id=user_id, name=user_name),
        fields={"text": text, "user_id": user_id, "user_name": user_name},
    )

    intent = context.executor.execute(record)
    if intent is None:
        console.print("[dim](no reply)[/dim]")
        return
    console.print(intent.text, markup=False, highlight=False, soft_wrap=True)
