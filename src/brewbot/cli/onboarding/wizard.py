# src/brewbot/cli/onboarding/wizard.py
"""Onboarding wizard orchestrator."""

from pathlib import Path

from rich.console import Console

from brewbot.cli.onboarding.steps import (
    BaseStep,
    CheckWorkspaceStep,
    ConfigureAdminStep,
    ConfigureSlackStep,
    SaveConfigStep,
    SetupWorkspaceStep,
)


class OnboardingWizard:
    """Guides users through initial configuration."""

    STEPS: list[type[BaseStep]] = [
        CheckWorkspaceStep,
        SetupWorkspaceStep,
        ConfigureAdminStep,
        ConfigureSlackStep,
        SaveConfigStep,
    ]

    def __init__(self, workspace: Path | None = None):
        self.workspace = workspace or Path.home() / ".brewbot"

    def run(self) -> bool:
        """Run all onboarding steps. Returns True if successful."""
        console = Console()
        state: dict = {}

        console.print("\n[bold cyan]Welcome to Brewbot![/bold cyan]")
        console.print("Let's set up your configuration.\n")

        for step_cls in self.STEPS:
            step = step_cls(self.workspace, console)
            if not step.run(state):
                console.print("[yellow]Onboarding cancelled.[/yellow]")
                return False

        console.print("\n[green]Configuration saved![/green]")
        console.print(f"Config file: {self.workspace / 'config.user.yaml'}")
        console.print("Edit this file to make changes.\n")
        return True
