"""Service layer for EMPDEPT.

Implements the tutorial use-cases: the named query scenarios, their
expectations, and the runner that executes them with failure isolation.

Dependency rule: may import `empdept.domain`, `empdept.interfaces` and
`empdept.queries`, but not `empdept.adapters` or `empdept.entrypoints`.
"""

from .errors import DuplicateScenarioError, ScenarioError, UnknownScenarioError
from .runner import RunReport, ScenarioResult, ScenarioRunner
from .scenarios import SCENARIOS, Scenario, get_scenario

__all__ = [
    "SCENARIOS",
    "Scenario",
    "get_scenario",
    "ScenarioRunner",
    "ScenarioResult",
    "RunReport",
    "ScenarioError",
    "UnknownScenarioError",
    "DuplicateScenarioError",
]
