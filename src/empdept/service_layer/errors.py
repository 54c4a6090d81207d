"""Service-layer error definitions."""


class ScenarioError(Exception):
    """Base class for scenario registry and runner errors."""


class UnknownScenarioError(ScenarioError, LookupError):
    """Raised when a scenario name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No scenario named {name!r}")
        self.name = name


class DuplicateScenarioError(ScenarioError):
    """Raised when two scenarios are registered under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Scenario {name!r} is already registered")
        self.name = name
