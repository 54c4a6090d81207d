"""Wire the fixture store and the scenario runner together."""

from __future__ import annotations

from dataclasses import dataclass

from empdept.adapters.fixture_store import InMemoryFixtureStore
from empdept.interfaces.fixture_store import FixtureStore
from empdept.service_layer.runner import ScenarioRunner


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    store: FixtureStore
    runner: ScenarioRunner


def bootstrap(store: FixtureStore | None = None) -> AppContainer:
    """Build the application with the tutorial fixture store by default."""
    if store is None:
        store = InMemoryFixtureStore()
    return AppContainer(store=store, runner=ScenarioRunner(store))
