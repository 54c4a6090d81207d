"""Fixtures for end-to-end CLI tests.

Provides a CliRunner, an isolated filesystem per test, and a fixture that
swaps the application wiring for one whose scenarios fail in known ways.
"""

import logging

import pytest
from click.testing import CliRunner

from empdept.adapters.fixture_store import InMemoryFixtureStore
from empdept.bootstrap import AppContainer
from empdept.entrypoints.cli import main
from empdept.service_layer.runner import ScenarioRunner
from empdept.service_layer.scenarios import Scenario

# pylint: disable=redefined-outer-name


def _wrong_result(result):
    raise AssertionError("expected ALLEN, got nobody")


def _broken_query(store):
    raise KeyError("ename")


BROKEN_SCENARIOS = {
    "passes": Scenario(
        "passes", "Always passes", "SELECT 1", lambda s: [1], lambda r: None
    ),
    "fails": Scenario(
        "fails", "Wrong result", "SELECT ENAME FROM EMP", lambda s: [], _wrong_result
    ),
    "errors": Scenario(
        "errors", "Broken query", "SELECT ENAME FROM EMP", _broken_query, lambda r: None
    ),
}


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem so the flight recorder writes locally."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root handlers and logger levels the CLI installs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    levels = {
        name: logger.level
        for name, logger in logging.Logger.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    root_level = root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(root_level)
        for name, logger in logging.Logger.manager.loggerDict.items():
            if isinstance(logger, logging.Logger):
                logger.setLevel(levels.get(name, logging.NOTSET))


@pytest.fixture
def broken_app(monkeypatch):
    """Make the CLI run one passing, one failing and one erroring scenario."""
    store = InMemoryFixtureStore()
    app = AppContainer(store=store, runner=ScenarioRunner(store, BROKEN_SCENARIOS))
    monkeypatch.setattr(main, "bootstrap", lambda: app)
    return app
