"""Configuration management for brewbot."""

import logging
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from brewbot.core.commands.base import Scope


# ============================================================================
# Configuration Models
# ============================================================================


class AdminConfig(BaseModel):
    """The brew master: the person told to make more coffee."""

    id: str
    username: str


class ApiConfig(BaseModel):
    """HTTP API configuration."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, gt=0, lt=65536)


def _default_slash_commands() -> dict[str, Scope]:
    return {
        "/coffee": Scope.PRIVATE,
        "/brew": Scope.PUBLIC,
        "/coffee-peek": Scope.EPHEMERAL,
    }


class SlackConfig(BaseModel):
    """Slack slash-command configuration."""

    verification_token: str | None = None
    commands: dict[str, Scope] = Field(default_factory=_default_slash_commands)

    @field_validator("commands")
    @classmethod
    def commands_must_start_with_slash(cls, v: dict[str, Scope]) -> dict[str, Scope]:
        for command in v:
            if not command.startswith("/"):
                raise ValueError(f"slash command must start with '/': {command}")
        return v


# ============================================================================
# Main Configuration Class
# ============================================================================


class Config(BaseModel):
    """
    Main configuration for brewbot.

    Configuration is loaded from ~/.brewbot/:
    1. config.user.yaml - User configuration (required fields: admin)
    2. config.runtime.yaml - Runtime state (optional, overrides user)

    Runtime config takes precedence over user config. Pydantic defaults are used
    for optional fields not specified in config files.
    """

    model_config = ConfigDict(frozen=True)

    workspace: Path
    admin: AdminConfig
    store_path: Path = Field(default=Path(".brews"))
    logging_path: Path = Field(default=Path(".logs"))
    timezone: str = "America/Chicago"
    log_level: str = "INFO"
    api: ApiConfig = Field(default_factory=ApiConfig)
    slack: SlackConfig = Field(default_factory=SlackConfig)

    @field_validator("store_path", "logging_path")
    @classmethod
    def path_must_be_relative(cls, v: Path, info: ValidationInfo) -> Path:
        if v.is_absolute():
            raise ValueError(f"{info.field_name} must be relative, got: {v}")
        return v

    @field_validator("timezone")
    @classmethod
    def timezone_must_exist(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_exist(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def store_dir(self) -> Path:
        return self.workspace / self.store_path

    @property
    def logging_dir(self) -> Path:
        return self.workspace / self.logging_path

    @property
    def log_file(self) -> Path:
        return self.logging_dir / "brewbot.log"

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def load(cls, workspace_dir: Path) -> "Config":
        """
        Load configuration from ~/.brewbot/.

        Args:
            workspace_dir: Path to workspace directory

        Returns:
            Config instance with all settings loaded and validated

        Raises:
            FileNotFoundError: If config.user.yaml doesn't exist
            ValidationError: If configuration is invalid
        """
        user_config = workspace_dir / "config.user.yaml"
        runtime_config = workspace_dir / "config.runtime.yaml"

        if not user_config.exists():
            raise FileNotFoundError(f"Config file not found: {user_config}")

        config_data: dict = {"workspace": workspace_dir}

        with open(user_config) as f:
            user_data = yaml.safe_load(f) or {}
        config_data = cls._deep_merge(config_data, user_data)

        # Deep merge runtime config (overrides user)
        if runtime_config.exists():
            with open(runtime_config) as f:
                runtime_data = yaml.safe_load(f) or {}
            config_data = cls._deep_merge(config_data, runtime_data)

        return cls.model_validate(config_data)

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """
        Deep merge override dict into base dict.

        Args:
            base: Base dictionary
            override: Override dictionary (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = Config._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
