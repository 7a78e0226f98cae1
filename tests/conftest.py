"""Shared test fixtures for brewbot test suite."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from brewbot.core.brew_store import Brew, BrewStore
from brewbot.core.commands.base import (
    CommandContext,
    CommandRecord,
    Scope,
    UserIdentity,
)
from brewbot.core.context import SharedContext
from brewbot.core.responses import SlackResponseBuilder
from brewbot.utils.config import AdminConfig, Config

# Sunday, Jan 5 2025, 15:05 UTC == 9:05 AM in Chicago
NOW = datetime(2025, 1, 5, 15, 5, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Frozen clock value used by make_ctx and make_brew."""
    return NOW


@pytest.fixture
def admin_config() -> AdminConfig:
    """Brew master used across tests."""
    return AdminConfig(id="U0ADMIN", username="nick")


@pytest.fixture
def test_config(tmp_path: Path, admin_config: AdminConfig) -> Config:
    """Config with workspace pointing to tmp_path."""
    return Config(workspace=tmp_path, admin=admin_config)


@pytest.fixture
def test_context(test_config: Config) -> SharedContext:
    """SharedContext with test config."""
    return SharedContext(config=test_config)


@pytest.fixture
def brew_store(tmp_path: Path) -> BrewStore:
    """BrewStore instance for testing."""
    return BrewStore(tmp_path / "brews")


@pytest.fixture
def user() -> UserIdentity:
    return UserIdentity(id="U123", name="alice")


@pytest.fixture
def make_ctx(brew_store: BrewStore, user: UserIdentity):
    """Build a CommandContext for a command text, frozen at NOW."""

    def _make(
        text: str = "",
        scope: Scope = Scope.PRIVATE,
        fields: dict[str, str] | None = None,
        now: datetime = NOW,
    ) -> CommandContext:
        record = CommandRecord.from_text(text, scope=scope, user=user, fields=fields)
        return CommandContext(
            record=record,
            store=brew_store,
            responses=SlackResponseBuilder(),
            admin=UserIdentity(id="U0ADMIN", name="nick"),
            clock=lambda: now,
            tz=ZoneInfo("America/Chicago"),
        )

    return _make


@pytest.fixture
def make_brew():
    """Build a Brew brewed ``minutes_ago`` before NOW."""

    def _make(name: str, minutes_ago: int = 0, brewed_by: str = "alice", gone=False):
        return Brew(
            name=name,
            brewed_by=brewed_by,
            brewed_at=NOW - timedelta(minutes=minutes_ago),
            gone=gone,
        )

    return _make
