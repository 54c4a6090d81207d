"""In-memory fixture store holding the classic SCOTT tutorial tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from itertools import combinations

from empdept.domain.errors import OverlappingSalaryGradesError, UncoveredSalaryError
from empdept.domain.records import Department, Employee, SalaryGrade
from empdept.interfaces.fixture_store import FixtureStore

logger = logging.getLogger(__name__)

# ============================================================================
#                              Tutorial data
# ============================================================================

EMP: tuple[Employee, ...] = (
    Employee(7839, "KING", "PRESIDENT", Decimal("5000"), 10, None, date(1981, 11, 17)),
    Employee(7782, "CLARK", "MANAGER", Decimal("2450"), 10, 7839, date(1981, 6, 9)),
    Employee(7934, "MILLER", "CLERK", Decimal("1300"), 10, 7782, date(1982, 1, 23)),
    Employee(7566, "JONES", "MANAGER", Decimal("2975"), 20, 7839, date(1981, 4, 2)),
    Employee(7902, "FORD", "ANALYST", Decimal("3000"), 20, 7566, date(1981, 12, 3)),
    Employee(7369, "SMITH", "CLERK", Decimal("800"), 20, 7902, date(1980, 12, 17)),
    Employee(
        7499,
        "ALLEN",
        "SALESMAN",
        Decimal("1600"),
        30,
        7839,
        date(1981, 2, 20),
        comm=Decimal("300"),
    ),
    Employee(
        7521,
        "WARD",
        "SALESMAN",
        Decimal("1250"),
        30,
        7839,
        date(1981, 2, 22),
        comm=Decimal("500"),
    ),
)

DEPT: tuple[Department, ...] = (
    Department(10, "ACCOUNTING", "NEW YORK"),
    Department(20, "RESEARCH", "DALLAS"),
    Department(30, "SALES", "CHICAGO"),
    Department(40, "OPERATIONS", "BOSTON"),
)

SALGRADE: tuple[SalaryGrade, ...] = (
    SalaryGrade(1, Decimal("700"), Decimal("1200")),
    SalaryGrade(2, Decimal("1201"), Decimal("1400")),
    SalaryGrade(3, Decimal("1401"), Decimal("2000")),
    SalaryGrade(4, Decimal("2001"), Decimal("3000")),
    SalaryGrade(5, Decimal("3001"), Decimal("9999")),
)


# ============================================================================
#                              Fixture store
# ============================================================================


class InMemoryFixtureStore(FixtureStore):
    """Fixture store backed by immutable in-memory tuples.

    By default the store serves the tutorial tables above. Tests may pass their
    own tables; they are copied into tuples so later changes to the caller's
    lists do not leak into the store.

    Args:
        employees: EMP rows, defaults to the tutorial table.
        departments: DEPT rows, defaults to the tutorial table.
        salary_grades: SALGRADE rows, defaults to the tutorial table.
        validate: Check that grade bands do not overlap and that every salary
            falls in exactly one band.

    Raises:
        OverlappingSalaryGradesError: If two grade bands overlap.
        UncoveredSalaryError: If an employee salary falls in no grade band.
    """

    def __init__(
        self,
        employees: Iterable[Employee] | None = None,
        departments: Iterable[Department] | None = None,
        salary_grades: Iterable[SalaryGrade] | None = None,
        *,
        validate: bool = True,
    ) -> None:
        self._employees = EMP if employees is None else tuple(employees)
        self._departments = DEPT if departments is None else tuple(departments)
        self._salary_grades = (
            SALGRADE if salary_grades is None else tuple(salary_grades)
        )
        if validate:
            check_salary_grades(self._salary_grades, self._employees)
        logger.debug(
            "Fixture store ready: %d employees, %d departments, %d salary grades",
            len(self._employees),
            len(self._departments),
            len(self._salary_grades),
        )

    def employees(self) -> tuple[Employee, ...]:
        return self._employees

    def departments(self) -> tuple[Department, ...]:
        return self._departments

    def salary_grades(self) -> tuple[SalaryGrade, ...]:
        return self._salary_grades


def check_salary_grades(
    grades: Iterable[SalaryGrade], employees: Iterable[Employee]
) -> None:
    """Validate that grade bands are disjoint and cover every salary.

    Args:
        grades: The SALGRADE rows to check.
        employees: The EMP rows whose salaries must be covered.

    Raises:
        OverlappingSalaryGradesError: If two bands share an amount.
        UncoveredSalaryError: If a salary falls in no band.
    """
    grades = tuple(grades)
    for first, second in combinations(grades, 2):
        if first.overlaps(second):
            raise OverlappingSalaryGradesError(first.grade, second.grade)
    # disjoint bands: at most one match per salary, so only zero needs checking
    for emp in employees:
        if not any(grade.contains(emp.sal) for grade in grades):
            raise UncoveredSalaryError(emp.ename, emp.sal)
