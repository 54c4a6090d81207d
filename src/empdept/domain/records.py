"""Immutable records for the EMP, DEPT and SALGRADE tutorial tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .errors import InvalidRecordError

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True, slots=True)
class Employee:
    """A row of the EMP table.

    Conventions:
      - `ename` and `job` are canonical uppercase (e.g., "ALLEN", "SALESMAN").
      - `sal` is a non-negative `Decimal`.
      - `comm` is a non-negative `Decimal`, or None when the employee has no
        commission. None and `Decimal(0)` are different values.
      - `mgr` is the `empno` of the manager, None for the top of the hierarchy.
      - `deptno` is not checked against DEPT; unknown departments are legal.
    """

    empno: int
    ename: str
    job: str
    sal: Decimal
    deptno: int
    mgr: int | None = None
    hiredate: date | None = None
    comm: Decimal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "ename", self.ename.upper())
        object.__setattr__(self, "job", self.job.upper())

        if not self.ename.strip():
            raise InvalidRecordError("employee", self.empno, "ename must not be blank")
        if self.sal < 0:
            raise InvalidRecordError(
                "employee", self.ename, "sal must not be negative"
            )
        if self.comm is not None and self.comm < 0:
            raise InvalidRecordError(
                "employee", self.ename, "comm must not be negative if set"
            )


@dataclass(frozen=True, slots=True)
class Department:
    """A row of the DEPT table; `dname` and `loc` are canonical uppercase."""

    deptno: int
    dname: str
    loc: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "dname", self.dname.upper())
        object.__setattr__(self, "loc", self.loc.upper())


@dataclass(frozen=True, slots=True)
class SalaryGrade:
    """A row of the SALGRADE table: the inclusive band [losal, hisal]."""

    grade: int
    losal: Decimal
    hisal: Decimal

    def __post_init__(self) -> None:
        if self.losal > self.hisal:
            raise InvalidRecordError(
                "salary grade", self.grade, "losal must not exceed hisal"
            )

    def contains(self, amount: Decimal) -> bool:
        """Return True if `amount` lies within the band, bounds included."""
        return self.losal <= amount <= self.hisal

    def overlaps(self, other: SalaryGrade) -> bool:
        """Return True if both bands share at least one amount."""
        return self.losal <= other.hisal and other.losal <= self.hisal
