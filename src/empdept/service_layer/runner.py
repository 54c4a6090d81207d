"""Scenario runner executing scenarios with failure isolation."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .errors import UnknownScenarioError
from .scenarios import SCENARIOS

if TYPE_CHECKING:
    from empdept.interfaces.fixture_store import FixtureStore

    from .scenarios import Scenario

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScenarioResult:
    """Outcome of one scenario.

    Attributes:
        name: Scenario name.
        passed: True if the query ran and its expectation held.
        message: Failure or error message, empty when passed.
        elapsed: Wall-clock seconds spent on the scenario.
        error: True if the scenario raised something other than an
            `AssertionError` (a broken query rather than a wrong result).
        output: What the query returned, or None if it raised.
    """

    name: str
    passed: bool
    message: str = ""
    elapsed: float = 0.0
    error: bool = False
    output: Any = field(default=None, repr=False, compare=False)

    @property
    def status(self) -> str:
        """Short status label: ``PASS``, ``FAIL`` or ``ERROR``."""
        if self.passed:
            return "PASS"
        return "ERROR" if self.error else "FAIL"


@dataclass(frozen=True, slots=True)
class RunReport:
    """Results of a run, in execution order."""

    results: tuple[ScenarioResult, ...]

    @property
    def passed(self) -> int:
        """Number of scenarios that passed."""
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        """Number of scenarios that failed or errored."""
        return len(self.results) - self.passed

    @property
    def ok(self) -> bool:
        """True if every scenario passed (vacuously True for an empty run)."""
        return self.failed == 0


class ScenarioRunner:
    """Run scenarios against one fixture store.

    A scenario fails when its expectation raises `AssertionError`; any other
    exception is recorded as an error. Either way the runner logs the outcome
    and moves on to the next scenario, so one failure never aborts a run.

    Args:
        store: Fixture store passed to every scenario query.
        scenarios: Scenarios keyed by name. Defaults to the registered
            tutorial scenarios.
    """

    def __init__(
        self,
        store: FixtureStore,
        scenarios: Mapping[str, Scenario] | None = None,
    ) -> None:
        self.store = store
        self._scenarios = dict(SCENARIOS if scenarios is None else scenarios)

    @property
    def names(self) -> tuple[str, ...]:
        """Names of the available scenarios, in registration order."""
        return tuple(self._scenarios)

    def get(self, name: str) -> Scenario:
        """Return the scenario called `name`.

        Raises:
            UnknownScenarioError: If no scenario has that name.
        """
        if (found := self._scenarios.get(name)) is None:
            raise UnknownScenarioError(name)
        return found

    def run(self, names: Iterable[str] | None = None) -> RunReport:
        """Run the named scenarios, or all of them, in order.

        Args:
            names: Scenario names to run. Defaults to every scenario.

        Returns:
            A `RunReport` with one result per scenario.

        Raises:
            UnknownScenarioError: If a name is not registered. Names are
                resolved before anything runs.
        """
        if names is None:
            names = self.names
        selected = [self.get(name) for name in names]
        logger.info("Running %d scenario(s)", len(selected))

        results = tuple(self.run_one(s) for s in selected)
        report = RunReport(results)
        logger.info("%d passed, %d failed", report.passed, report.failed)
        return report

    def run_one(self, scenario: Scenario) -> ScenarioResult:
        """Run a single scenario and capture its outcome."""
        logger.debug("Running scenario %s: %s", scenario.name, scenario.sql)
        start = time.perf_counter()
        output = None
        try:
            output = scenario.query(self.store)
            scenario.expect(output)
        except AssertionError as e:
            elapsed = time.perf_counter() - start
            logger.warning("Scenario %s failed: %s", scenario.name, e)
            return ScenarioResult(scenario.name, False, str(e), elapsed, output=output)
        except Exception as e:  # pylint: disable=broad-except
            elapsed = time.perf_counter() - start
            logger.exception("Scenario %s raised an error", scenario.name)
            return ScenarioResult(
                scenario.name, False, f"{type(e).__name__}: {e}", elapsed, error=True
            )
        elapsed = time.perf_counter() - start
        logger.debug("Scenario %s passed in %.6fs", scenario.name, elapsed)
        return ScenarioResult(scenario.name, True, elapsed=elapsed, output=output)
