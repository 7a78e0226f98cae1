"""Onboarding step classes."""

from pathlib import Path

import questionary
import yaml
from pydantic import ValidationError
from rich.console import Console

from brewbot.core.commands.base import Scope
from brewbot.utils.config import Config


class BaseStep:
    """Base class for onboarding steps."""

    def __init__(self, workspace: Path, console: Console):
        self.workspace = workspace
        self.console = console

    def run(self, state: dict) -> bool:
        """Execute step. Return True on success, False to abort."""
        raise NotImplementedError


class CheckWorkspaceStep(BaseStep):
    """Check if workspace exists and prompt for overwrite confirmation."""

    def run(self, state: dict) -> bool:
        config_path = self.workspace / "config.user.yaml"

        if config_path.exists():
            self.console.print(
                f"\n[yellow]Workspace already exists at {self.workspace}[/yellow]"
            )

            proceed = questionary.confirm(
                "This will overwrite your existing configuration. Continue?",
                default=False,
            ).ask()

            return bool(proceed)

        return True


class SetupWorkspaceStep(BaseStep):
    """Create workspace directory and required subdirectories."""

    def run(self, state: dict) -> bool:
        self.workspace.mkdir(parents=True, exist_ok=True)

        for subdir in [".brews", ".logs"]:
            (self.workspace / subdir).mkdir(exist_ok=True)

        return True


class ConfigureAdminStep(BaseStep):
    """Prompt for the brew master's Slack identity."""

    def run(self, state: dict) -> bool:
        admin_id = questionary.text("Brew master's Slack user ID:").ask()
        username = questionary.text("Brew master's Slack username:").ask()

        if not admin_id or not username:
            self.console.print("[red]Both the user ID and username are required.[/red]")
            return False

        timezone = questionary.text(
            "Time zone for brew times:", default="America/Chicago"
        ).ask()

        state["admin"] = {"id": admin_id, "username": username}
        if timezone:
            state["timezone"] = timezone
        return True


class ConfigureSlackStep(BaseStep):
    """Prompt for Slack slash-command settings."""

    def run(self, state: dict) -> bool:
        token = questionary.text(
            "Slack verification token (optional, press Enter to skip):",
            default="",
        ).ask()

        commands: dict[str, str] = {}
        for scope in Scope:
            command = questionary.text(
                f"Slash command for {scope.value} replies (press Enter to skip):",
                default=self._default_command(scope),
            ).ask()
            if command:
                commands[command] = scope.value

        slack: dict = {}
        if token:
            slack["verification_token"] = token
        if commands:
            slack["commands"] = commands
        if slack:
            state["slack"] = slack

        return True

    @staticmethod
    def _default_command(scope: Scope) -> str:
        return {
            Scope.PUBLIC: "/brew",
            Scope.PRIVATE: "/coffee",
            Scope.EPHEMERAL: "/coffee-peek",
        }[scope]


class SaveConfigStep(BaseStep):
    """Write configuration to config.user.yaml."""

    def run(self, state: dict) -> bool:
        # Validate config structure
        try:
            config_data = {"workspace": self.workspace}
            config_data.update(state)
            Config.model_validate(config_data)
        except ValidationError as e:
            self.console.print("\n[red]Configuration validation failed:[/red]")
            for error in e.errors():
                self.console.print(f"  - {error['loc'][0]}: {error['msg']}")
            return False

        # Write user config
        user_config_path = self.workspace / "config.user.yaml"
        with open(user_config_path, "w") as f:
            yaml.dump(state, f, default_flow_style=False)

        return True
