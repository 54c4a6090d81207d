"""Adapters (infrastructure) for EMPDEPT.

Provide concrete implementations of the interfaces, currently the in-memory
fixture store holding the tutorial dataset.

Dependency rule: may import `empdept.domain` and `empdept.interfaces`; the
domain must not import this package.
"""

from .fixture_store import InMemoryFixtureStore

__all__ = ["InMemoryFixtureStore"]
