"""JSONL file-based brew storage."""

import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, field_validator

from brewbot.utils.config import Config


def _new_id() -> str:
    return uuid.uuid4().hex


class Brew(BaseModel):
    """A pot of coffee - one line in brews.jsonl."""

    id: str = Field(default_factory=_new_id)
    name: str
    brewed_by: str
    brewed_at: datetime
    gone: bool = False

    @field_validator("brewed_at")
    @classmethod
    def brewed_at_must_be_aware(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("brewed_at must be timezone-aware")
        return v.astimezone(timezone.utc)


class BrewRepository(Protocol):
    """The storage operations command handlers depend on."""

    def save(self, brew: Brew) -> Brew: ...

    def find_recent(self, limit: int) -> list[Brew]: ...

    def find_open(self) -> list[Brew]: ...


class BrewStore:
    """
    JSONL file-based brew storage.

    Directory structure:
    ~/.brewbot/.brews/
    └── brews.jsonl     # One Brew per line, rewritten when a brew changes
    """

    @staticmethod
    def from_config(config: Config) -> "BrewStore":
        return BrewStore(config.store_dir)

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)
        self.brews_path = self.base_path / "brews.jsonl"
        self._lock = threading.Lock()

        self.base_path.mkdir(parents=True, exist_ok=True)

    def _read_all(self) -> list[Brew]:
        if not self.brews_path.exists():
            return []

        brews = []
        with open(self.brews_path) as f:
            for line in f:
                line = line.strip()
                if line:
                    brews.append(Brew.model_validate_json(line))
        return brews

    def _write_all(self, brews: list[Brew]) -> None:
        tmp_path = self.brews_path.with_suffix(".jsonl.tmp")
        with open(tmp_path, "w") as f:
            for brew in brews:
                f.write(brew.model_dump_json() + "\n")
        tmp_path.replace(self.brews_path)

    def save(self, brew: Brew) -> Brew:
        """Insert a new brew or replace the stored brew with the same id."""
        with self._lock:
            brews = self._read_all()
            for i, existing in enumerate(brews):
                if existing.id == brew.id:
                    brews[i] = brew
                    self._write_all(brews)
                    return brew

            with open(self.brews_path, "a") as f:
                f.write(brew.model_dump_json() + "\n")
            return brew

    def find_recent(self, limit: int) -> list[Brew]:
        """Up to ``limit`` brews, most recent first."""
        if limit <= 0:
            return []
        with self._lock:
            brews = self._read_all()
        brews.sort(key=lambda b: b.brewed_at, reverse=True)
        return brews[:limit]

    def find_open(self) -> list[Brew]:
        """Brews not yet marked gone, most recent first."""
        with self._lock:
            brews = self._read_all()
        open_brews = [b for b in brews if not b.gone]
        open_brews.sort(key=lambda b: b.brewed_at, reverse=True)
        return open_brews
