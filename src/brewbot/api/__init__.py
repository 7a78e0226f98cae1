"""HTTP API for brewbot."""

from brewbot.api.app import create_app

__all__ = ["create_app"]
