"""Interfaces (application boundary) for EMPDEPT.

Defines framework-free contracts shared by the service layer and adapters,
such as the fixture store that supplies the tutorial tables.

Dependency rule: may import `empdept.domain` record types only. It may be
imported by `empdept.service_layer`, `empdept.adapters`, and
`empdept.entrypoints`.
"""

from .fixture_store import FixtureStore

__all__ = ["FixtureStore"]
