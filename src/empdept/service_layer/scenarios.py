"""The tutorial scenarios: SQL exercises written as query compositions.

Each scenario pairs a query over the fixture tables with an expectation about
its result. Scenarios are registered in definition order in `SCENARIOS`,
keyed by name.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from empdept.queries import Query, average, count, is_present

from .errors import DuplicateScenarioError, UnknownScenarioError
from .expectations import (
    expect,
    expect_all,
    expect_any,
    expect_contains,
    expect_equal,
    expect_non_increasing,
)

if TYPE_CHECKING:
    from empdept.interfaces.fixture_store import FixtureStore

# pylint: disable=missing-function-docstring


@dataclass(frozen=True, slots=True)
class Scenario:
    """A named query with its SQL equivalent and expected outcome.

    Attributes:
        name: Unique snake_case identifier (e.g. ``"salesmen"``).
        title: One-line human description.
        sql: The SQL statement the query reproduces.
        query: Runs the query against a fixture store.
        expect: Raises `AssertionError` if the query result is wrong.
    """

    name: str
    title: str
    sql: str
    query: Callable[[FixtureStore], Any]
    expect: Callable[[Any], None]

    def check(self, store: FixtureStore) -> Any:
        """Run the query, verify its result, and return the result."""
        result = self.query(store)
        self.expect(result)
        return result


SCENARIOS: dict[str, Scenario] = {}


def scenario(
    name: str, title: str, sql: str, expectation: Callable[[Any], None]
) -> Callable[[Callable[[FixtureStore], Any]], Callable[[FixtureStore], Any]]:
    """Register the decorated query as a scenario.

    Raises:
        DuplicateScenarioError: If `name` is already registered.
    """

    def register(
        query: Callable[[FixtureStore], Any],
    ) -> Callable[[FixtureStore], Any]:
        if name in SCENARIOS:
            raise DuplicateScenarioError(name)
        SCENARIOS[name] = Scenario(name, title, sql, query, expectation)
        return query

    return register


def get_scenario(name: str) -> Scenario:
    """Look up a registered scenario by name.

    Raises:
        UnknownScenarioError: If no scenario has that name.
    """
    try:
        return SCENARIOS[name]
    except KeyError as e:
        raise UnknownScenarioError(name) from e


# ============================================================================
#                           1. Simple WHERE filter
# ============================================================================


def _expect_two_salesmen(result: list[Any]) -> None:
    expect_equal(len(result), 2, "number of salesmen")
    expect_all(result, lambda e: e.job == "SALESMAN", "job of every row")


@scenario(
    "salesmen",
    "All salesmen",
    "SELECT * FROM EMP WHERE JOB = 'SALESMAN'",
    _expect_two_salesmen,
)
def salesmen(store: FixtureStore) -> list[Any]:
    return Query(store.employees()).where(lambda e: e.job == "SALESMAN").to_list()


# ============================================================================
#                           2. WHERE + ORDER BY
# ============================================================================


def _expect_dept30_descending(result: list[Any]) -> None:
    expect_equal(len(result), 2, "number of department 30 employees")
    expect_non_increasing([e.sal for e in result], "salaries")


@scenario(
    "dept30_by_salary_desc",
    "Department 30 by salary, highest first",
    "SELECT * FROM EMP WHERE DEPTNO = 30 ORDER BY SAL DESC",
    _expect_dept30_descending,
)
def dept30_by_salary_desc(store: FixtureStore) -> list[Any]:
    return (
        Query(store.employees())
        .where(lambda e: e.deptno == 30)
        .order_by("sal", descending=True)
        .to_list()
    )


# ============================================================================
#                           3. IN subquery
# ============================================================================


def _expect_only_dept30(result: list[Any]) -> None:
    expect_all(result, lambda e: e.deptno == 30, "department of every row")


@scenario(
    "chicago_employees",
    "Employees of departments located in Chicago",
    "SELECT * FROM EMP WHERE DEPTNO IN "
    "(SELECT DEPTNO FROM DEPT WHERE LOC = 'CHICAGO')",
    _expect_only_dept30,
)
def chicago_employees(store: FixtureStore) -> list[Any]:
    chicago = (
        Query(store.departments())
        .where(lambda d: d.loc == "CHICAGO")
        .select("deptno")
    )
    return (
        Query(store.employees()).where_in("deptno", [d.deptno for d in chicago])
    ).to_list()


# ============================================================================
#                           4. Projection
# ============================================================================


def _expect_named_and_paid(result: list[Any]) -> None:
    expect_all(result, lambda r: bool(r.ename.strip()), "employee name")
    expect_all(result, lambda r: r.sal > 0, "salary")
    expect_all(result, lambda r: set(r) == {"ename", "sal"}, "projected fields")


@scenario(
    "names_and_salaries",
    "Names and salaries",
    "SELECT ENAME, SAL FROM EMP",
    _expect_named_and_paid,
)
def names_and_salaries(store: FixtureStore) -> list[Any]:
    return Query(store.employees()).select("ename", "sal").to_list()


# ============================================================================
#                           5. JOIN EMP to DEPT
# ============================================================================


def _expect_allen_in_sales(result: list[Any]) -> None:
    expect_any(
        result,
        lambda r: r.dname == "SALES" and r.ename == "ALLEN",
        "ALLEN in SALES",
    )


@scenario(
    "employees_with_departments",
    "Employees with their department names",
    "SELECT E.ENAME, E.SAL, D.DNAME FROM EMP E JOIN DEPT D ON E.DEPTNO = D.DEPTNO",
    _expect_allen_in_sales,
)
def employees_with_departments(store: FixtureStore) -> list[Any]:
    return (
        Query(store.employees())
        .join(store.departments(), "deptno", "deptno")
        .select("ename", "sal", "dname")
        .to_list()
    )


# ============================================================================
#                           6. GROUP BY with COUNT
# ============================================================================


def _expect_two_in_dept30(result: list[Any]) -> None:
    expect_any(
        result,
        lambda g: g.deptno == 30 and g.headcount == 2,
        "department 30 headcount",
    )


@scenario(
    "headcount_by_department",
    "Number of employees per department",
    "SELECT DEPTNO, COUNT(*) FROM EMP GROUP BY DEPTNO",
    _expect_two_in_dept30,
)
def headcount_by_department(store: FixtureStore) -> list[Any]:
    return Query(store.employees()).aggregate_by("deptno", headcount=count()).to_list()


# ============================================================================
#                           7. IS NOT NULL
# ============================================================================


def _expect_commission_present(result: list[Any]) -> None:
    expect_all(result, lambda r: r.comm is not None, "commission")


@scenario(
    "employees_with_commission",
    "Employees earning a commission",
    "SELECT ENAME, COMM FROM EMP WHERE COMM IS NOT NULL",
    _expect_commission_present,
)
def employees_with_commission(store: FixtureStore) -> list[Any]:
    return (
        Query(store.employees()).select("ename", "comm").where(is_present("comm"))
    ).to_list()


# ============================================================================
#                           8. Range join to SALGRADE
# ============================================================================


def _expect_allen_grade_3(result: list[Any]) -> None:
    expect_any(
        result,
        lambda r: r.ename == "ALLEN" and r.grade == 3,
        "ALLEN in grade 3",
    )


@scenario(
    "salary_grades",
    "Salary grade of every employee",
    "SELECT E.ENAME, S.GRADE FROM EMP E "
    "JOIN SALGRADE S ON E.SAL BETWEEN S.LOSAL AND S.HISAL",
    _expect_allen_grade_3,
)
def salary_grades(store: FixtureStore) -> list[Any]:
    return (
        Query(store.employees())
        .range_join(store.salary_grades(), "sal", "losal", "hisal")
        .select("ename", "grade")
        .to_list()
    )


# ============================================================================
#                           9. GROUP BY with AVG
# ============================================================================


def _expect_dept30_average_above_1000(result: list[Any]) -> None:
    dept30 = Query(result).first(lambda r: r.deptno == 30)
    expect(dept30 is not None, "department 30 missing from averages")
    expect(
        dept30.avg_sal > 1000,
        f"department 30 average salary: expected > 1000, got {dept30.avg_sal}",
    )


@scenario(
    "average_salary_by_department",
    "Average salary per department",
    "SELECT DEPTNO, AVG(SAL) FROM EMP GROUP BY DEPTNO",
    _expect_dept30_average_above_1000,
)
def average_salary_by_department(store: FixtureStore) -> list[Any]:
    return (
        Query(store.employees()).aggregate_by("deptno", avg_sal=average("sal"))
    ).to_list()


# ============================================================================
#                           10. Correlated subquery
# ============================================================================


def _expect_allen_above_average(result: list[str]) -> None:
    expect_contains(result, "ALLEN", "employees above their department average")


@scenario(
    "above_department_average",
    "Employees earning more than their department's average",
    "SELECT E.ENAME FROM EMP E WHERE E.SAL > "
    "(SELECT AVG(SAL) FROM EMP WHERE DEPTNO = E.DEPTNO)",
    _expect_allen_above_average,
)
def above_department_average(store: FixtureStore) -> list[str]:
    above = Query(store.employees()).where_correlated(
        "deptno", average("sal"), lambda e, avg_sal: e.sal > avg_sal
    )
    return [e.ename for e in above]
