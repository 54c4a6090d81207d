"""Aggregate functions applied to the rows of a group.

Each factory returns a callable that takes the rows of one group and returns a
scalar. Absent values (``None``) are skipped, as SQL aggregates skip NULLs.
Aggregates never raise on an empty group: ``count`` and ``total`` return 0,
the others return ``None``.

Example:
    >>> avg_sal = average("sal")
    >>> avg_sal(store.employees())
    Decimal('2296.875')
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

from .operators import Key, key_func

Aggregate: TypeAlias = Callable[[Sequence[Any]], Any]


def _present(rows: Sequence[Any], field: Key) -> list[Any]:
    get = key_func(field)
    return [value for value in map(get, rows) if value is not None]


def count(field: Key | None = None) -> Aggregate:
    """Count rows, or rows whose `field` is present when one is given."""
    if field is None:
        return len
    return lambda rows: len(_present(rows, field))


def total(field: Key) -> Aggregate:
    """Sum the present values of `field`; 0 for an empty group."""
    return lambda rows: sum(_present(rows, field), 0)


def average(field: Key) -> Aggregate:
    """Mean of the present values of `field`.

    `Decimal` values are divided exactly as `Decimal`; integers and floats
    yield a float. Returns None when no value is present.
    """

    def _average(rows: Sequence[Any]) -> Any:
        values = _present(rows, field)
        if not values:
            return None
        return sum(values, 0) / len(values)

    return _average


def minimum(field: Key) -> Aggregate:
    """Smallest present value of `field`, or None."""
    return lambda rows: min(_present(rows, field), default=None)


def maximum(field: Key) -> Aggregate:
    """Largest present value of `field`, or None."""
    return lambda rows: max(_present(rows, field), default=None)
