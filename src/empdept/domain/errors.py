"""Domain-layer error definitions."""

from decimal import Decimal

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidRecordError(DomainError):
    """Raised when a record is malformed or violates its invariants."""

    def __init__(self, kind: str, key: object, reason: str) -> None:
        super().__init__(f"Invalid {kind} ({key}) record: {reason}")
        self.kind = kind
        self.key = key
        self.reason = reason


# ============================================================================
#                        Fixture consistency errors
# ============================================================================


class FixtureError(DomainError):
    """Base class for inconsistencies across fixture tables."""


class OverlappingSalaryGradesError(FixtureError):
    """Raised when two salary grade bands share at least one amount."""

    def __init__(self, first_grade: int, second_grade: int) -> None:
        super().__init__(
            f"Salary grades {first_grade} and {second_grade} have overlapping bands."
        )
        self.first_grade = first_grade
        self.second_grade = second_grade


class UncoveredSalaryError(FixtureError):
    """Raised when an employee salary falls outside every salary grade band."""

    def __init__(self, ename: str, sal: Decimal) -> None:
        super().__init__(f"Salary {sal} of employee {ename} matches no salary grade.")
        self.ename = ename
        self.sal = sal
