"""Domain layer for EMPDEPT.

Contains the immutable tutorial records (employees, departments, salary grades)
and the errors raised when a record or fixture violates its invariants. This
package is deliberately technology-agnostic.

Dependency rule: do not import from `empdept.adapters` or `empdept.entrypoints`.
"""

from .errors import (
    DomainError,
    FixtureError,
    InvalidRecordError,
    OverlappingSalaryGradesError,
    UncoveredSalaryError,
)
from .records import Department, Employee, SalaryGrade

__all__ = [
    "Employee",
    "Department",
    "SalaryGrade",
    "DomainError",
    "InvalidRecordError",
    "FixtureError",
    "OverlappingSalaryGradesError",
    "UncoveredSalaryError",
]
