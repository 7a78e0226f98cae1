# tests/cli/onboarding/test_wizard.py
"""Integration tests for OnboardingWizard."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import yaml

from brewbot.cli.onboarding import OnboardingWizard
from brewbot.utils.config import Config


def test_wizard_default_workspace():
    """OnboardingWizard defaults to ~/.brewbot."""
    wizard = OnboardingWizard()
    assert wizard.workspace == Path.home() / ".brewbot"


def test_wizard_custom_workspace():
    """OnboardingWizard accepts custom workspace path."""
    workspace = Path("/tmp/test-workspace")
    wizard = OnboardingWizard(workspace=workspace)
    assert wizard.workspace == workspace


def test_run_with_no_steps_succeeds(tmp_path: Path):
    """run() with an empty step list succeeds."""
    wizard = OnboardingWizard(workspace=tmp_path / "workspace")

    with patch.object(wizard, "STEPS", []):
        assert wizard.run() is True


def test_run_stops_on_failed_step(tmp_path: Path):
    """run() returns False as soon as a step aborts."""
    failing = MagicMock()
    failing.return_value.run.return_value = False
    after = MagicMock()

    wizard = OnboardingWizard(workspace=tmp_path)
    with patch.object(wizard, "STEPS", [failing, after]):
        assert wizard.run() is False

    after.assert_not_called()


def test_full_run_writes_loadable_config(tmp_path: Path):
    """A complete run produces a config Config.load() accepts."""
    workspace = tmp_path / "workspace"
    answers = iter(
        [
            "U0ADMIN",  # admin id
            "nick",  # admin username
            "America/Chicago",  # timezone
            "",  # verification token
            "/brew",  # public
            "/coffee",  # private
            "",  # ephemeral skipped
        ]
    )

    with patch("questionary.text") as mock_text:
        mock_text.return_value.ask.side_effect = lambda: next(answers)
        assert OnboardingWizard(workspace=workspace).run() is True

    config = Config.load(workspace)
    assert config.admin.username == "nick"
    assert set(config.slack.commands) == {"/brew", "/coffee"}
    assert yaml.safe_load((workspace / "config.user.yaml").read_text())["admin"] == {
        "id": "U0ADMIN",
        "username": "nick",
    }
