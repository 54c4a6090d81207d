"""Interface for the fixture store supplying the tutorial tables."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from empdept.domain.records import Department, Employee, SalaryGrade


class FixtureStore(abc.ABC):
    """Read-only source of the EMP, DEPT and SALGRADE tables.

    Implementations must be deterministic: every call returns the same records
    in the same order, with no randomness and no external I/O.
    """

    @abc.abstractmethod
    def employees(self) -> tuple[Employee, ...]:
        """Return the EMP table in its canonical order."""

    @abc.abstractmethod
    def departments(self) -> tuple[Department, ...]:
        """Return the DEPT table in its canonical order."""

    @abc.abstractmethod
    def salary_grades(self) -> tuple[SalaryGrade, ...]:
        """Return the SALGRADE table ordered by grade."""
