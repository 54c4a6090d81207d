"""Pytest fixtures for FixtureStore contract tests.

Provided fixtures
-----------------
- **fixture_store**: Parametrized factory returning a fresh `FixtureStore` per
  test. `"tutorial"` serves the built-in EMP/DEPT/SALGRADE tables; `"custom"`
  serves a small hand-built dataset through the same class, which exercises
  the custom-table path. Add new backends to `params` and branch below.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

import pytest

from empdept.adapters.fixture_store import InMemoryFixtureStore
from empdept.domain import Department, Employee, SalaryGrade

if TYPE_CHECKING:
    from empdept.interfaces.fixture_store import FixtureStore


def custom_store() -> InMemoryFixtureStore:
    """A three-employee company with two salary bands."""
    return InMemoryFixtureStore(
        employees=[
            Employee(1, "ada", "boss", Decimal("4000"), 1, hiredate=date(2020, 1, 6)),
            Employee(2, "bob", "clerk", Decimal("900"), 1, mgr=1),
            Employee(3, "cy", "clerk", Decimal("1000"), 2, mgr=1, comm=Decimal("0")),
        ],
        departments=[Department(1, "hq", "paris"), Department(2, "ops", "lyon")],
        salary_grades=[
            SalaryGrade(1, Decimal("0"), Decimal("1000")),
            SalaryGrade(2, Decimal("1000.01"), Decimal("9999")),
        ],
    )


@pytest.fixture(params=["tutorial", "custom"])
def fixture_store(request: pytest.FixtureRequest) -> FixtureStore:
    """Return a fresh fixture store for the requested dataset."""
    match request.param:
        case "tutorial":
            return InMemoryFixtureStore()
        case "custom":
            return custom_store()
        case _:
            raise ValueError(f"unknown fixture store: {request.param}")
