"""Core brewbot functionality."""
