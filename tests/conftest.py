"""Global pytest fixtures for EMPDEPT."""

from __future__ import annotations

import pytest

from empdept.adapters.fixture_store import InMemoryFixtureStore
from empdept.service_layer.runner import ScenarioRunner

pytest_plugins = [
    "tests.fixtures.records",
]


@pytest.fixture
def store() -> InMemoryFixtureStore:
    """Return the fixture store serving the tutorial tables."""
    return InMemoryFixtureStore()


@pytest.fixture
def runner(store: InMemoryFixtureStore) -> ScenarioRunner:  # pylint: disable=redefined-outer-name
    """Return a scenario runner over the tutorial tables."""
    return ScenarioRunner(store)
