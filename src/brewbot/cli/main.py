"""CLI interface for brewbot using Typer."""

from pathlib import Path
from typing import Annotated

import questionary
import typer
from rich.console import Console
from rich.markup import escape

from brewbot.cli.onboarding import OnboardingWizard
from brewbot.cli.routing import commands_command, run_command
from brewbot.cli.server import server_command
from brewbot.core.commands.base import Scope
from brewbot.utils.config import Config

app = typer.Typer(
    name="brewbot",
    help="Brewbot: who brewed the coffee, and is there any left",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()


def load_config(ctx: typer.Context, workspace_path: Path) -> None:
    """Load configuration and store it in the context."""
    config_file = workspace_path / "config.user.yaml"

    try:
        if not config_file.exists():
            # Offer onboarding
            run_onboarding = questionary.confirm(
                "No configuration found. Run onboarding now?",
                default=True,
            ).ask()

            if not run_onboarding or not OnboardingWizard(workspace=workspace_path).run():
                console.print(
                    "[yellow]Run 'brewbot init' to set up configuration.[/yellow]"
                )
                raise typer.Exit(1)

        cfg = Config.load(workspace_path)
        ctx.ensure_object(dict)
        ctx.obj["config"] = cfg

    except typer.Exit:
        raise
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    workspace: Annotated[
        Path,
        typer.Option(
            "--workspace",
            "-w",
            help="Path to workspace directory",
        ),
    ] = Path.home() / ".brewbot",
) -> None:
    """
    Brewbot: a coffee tracker behind Slack slash commands.

    Configuration is loaded from ~/.brewbot/ by default.
    Use --workspace to specify a custom workspace directory.
    """
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = workspace
    if ctx.invoked_subcommand != "init":
        load_config(ctx, workspace)


@app.command()
def commands(
    ctx: typer.Context,
) -> None:
    """Show the command routing table."""
    commands_command(ctx)


@app.command()
def run(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Command text, e.g. 'brew Blue Heeler'")] = "",
    scope: Annotated[
        Scope, typer.Option("--scope", "-s", help="Reply scope")
    ] = Scope.PRIVATE,
    user_id: Annotated[str, typer.Option("--user-id", help="Invoking user ID")] = "cli-user",
    user_name: Annotated[
        str, typer.Option("--user-name", help="Invoking user name")
    ] = "cli-user",
) -> None:
    """Dispatch a single command locally and print the reply."""
    run_command(ctx, text, scope=scope, user_id=user_id, user_name=user_name)


@app.command("server")
def server(
    ctx: typer.Context,
) -> None:
    """Start the Slack slash-command server."""
    server_command(ctx)


@app.command()
def init(
    ctx: typer.Context,
) -> None:
    """Initialize brewbot configuration with interactive onboarding."""
    wizard = OnboardingWizard(workspace=ctx.obj["workspace"])
    if not wizard.run():
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
