# tests/cli/onboarding/test_steps.py
"""Unit tests for onboarding step classes."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from rich.console import Console

from brewbot.cli.onboarding.steps import (
    BaseStep,
    CheckWorkspaceStep,
    ConfigureAdminStep,
    ConfigureSlackStep,
    SaveConfigStep,
    SetupWorkspaceStep,
)


class TestBaseStep:
    """Tests for BaseStep."""

    def test_init_stores_dependencies(self, tmp_path: Path):
        console = Console()
        step = BaseStep(tmp_path, console)

        assert step.workspace == tmp_path
        assert step.console is console

    def test_run_raises_not_implemented(self, tmp_path: Path):
        with pytest.raises(NotImplementedError):
            BaseStep(tmp_path, Console()).run({})


class TestSetupWorkspaceStep:
    def test_creates_all_directories(self, tmp_path: Path):
        workspace = tmp_path / "workspace"
        step = SetupWorkspaceStep(workspace, Console())

        assert step.run({}) is True
        assert (workspace / ".brews").is_dir()
        assert (workspace / ".logs").is_dir()

    def test_idempotent(self, tmp_path: Path):
        step = SetupWorkspaceStep(tmp_path / "workspace", Console())
        step.run({})
        assert step.run({}) is True


class TestCheckWorkspaceStep:
    def test_returns_true_when_no_config(self, tmp_path: Path):
        step = CheckWorkspaceStep(tmp_path / "workspace", Console())
        assert step.run({}) is True

    @pytest.mark.parametrize("answer", [True, False])
    def test_prompts_when_config_exists(self, tmp_path: Path, answer):
        (tmp_path / "config.user.yaml").write_text("admin: {}")
        step = CheckWorkspaceStep(tmp_path, Console())

        with patch("questionary.confirm") as mock_confirm:
            mock_confirm.return_value.ask.return_value = answer
            result = step.run({})

        mock_confirm.assert_called_once()
        assert result is answer


class TestConfigureAdminStep:
    def test_stores_admin(self, tmp_path: Path):
        state: dict = {}
        with patch("questionary.text") as mock_text:
            mock_text.return_value.ask.side_effect = ["U1", "nick", "UTC"]
            assert ConfigureAdminStep(tmp_path, Console()).run(state) is True

        assert state == {"admin": {"id": "U1", "username": "nick"}, "timezone": "UTC"}

    def test_aborts_without_username(self, tmp_path: Path):
        with patch("questionary.text") as mock_text:
            mock_text.return_value.ask.side_effect = ["U1", "", "UTC"]
            assert ConfigureAdminStep(tmp_path, Console()).run({}) is False


class TestConfigureSlackStep:
    def test_stores_token_and_commands(self, tmp_path: Path):
        state: dict = {}
        with patch("questionary.text") as mock_text:
            mock_text.return_value.ask.side_effect = ["tok", "/brew", "/coffee", "/peek"]
            assert ConfigureSlackStep(tmp_path, Console()).run(state) is True

        assert state["slack"] == {
            "verification_token": "tok",
            "commands": {"/brew": "public", "/coffee": "private", "/peek": "ephemeral"},
        }

    def test_nothing_entered_keeps_defaults(self, tmp_path: Path):
        state: dict = {}
        with patch("questionary.text") as mock_text:
            mock_text.return_value.ask.return_value = ""
            ConfigureSlackStep(tmp_path, Console()).run(state)

        assert "slack" not in state


class TestSaveConfigStep:
    def test_writes_valid_config(self, tmp_path: Path):
        state = {"admin": {"id": "U1", "username": "nick"}}

        assert SaveConfigStep(tmp_path, Console()).run(state) is True
        assert yaml.safe_load((tmp_path / "config.user.yaml").read_text()) == state

    def test_rejects_invalid_config(self, tmp_path: Path):
        state = {"admin": {"id": "U1", "username": "nick"}, "timezone": "Mars/Base"}

        assert SaveConfigStep(tmp_path, Console()).run(state) is False
        assert not (tmp_path / "config.user.yaml").exists()
