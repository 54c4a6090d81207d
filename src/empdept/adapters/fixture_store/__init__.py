"""Fixture store adapters for EMPDEPT."""

from .memory import InMemoryFixtureStore

__all__ = ["InMemoryFixtureStore"]
