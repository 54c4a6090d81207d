"""Assertion helpers used by scenario expectations.

Each helper raises `AssertionError` with a descriptive message when the
expectation does not hold. They raise explicitly instead of using ``assert``
statements so expectations still run under ``python -O``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def expect(condition: bool, message: str) -> None:
    """Fail with `message` unless `condition` is true."""
    if not condition:
        raise AssertionError(message)


def expect_equal(actual: Any, expected: Any, what: str) -> None:
    """Fail unless `actual == expected`."""
    expect(actual == expected, f"{what}: expected {expected!r}, got {actual!r}")


def expect_all(
    rows: Iterable[Any], predicate: Callable[[Any], bool], what: str
) -> None:
    """Fail on the first row not matching `predicate`; empty input passes."""
    for index, row in enumerate(rows):
        expect(predicate(row), f"{what}: row {index} does not match: {row!r}")


def expect_any(
    rows: Iterable[Any], predicate: Callable[[Any], bool], what: str
) -> None:
    """Fail unless at least one row matches `predicate`."""
    rows = list(rows)
    expect(
        any(predicate(row) for row in rows),
        f"{what}: no matching row among {len(rows)} rows",
    )


def expect_contains(items: Iterable[Any], item: Any, what: str) -> None:
    """Fail unless `item` is one of `items`."""
    items = list(items)
    expect(item in items, f"{what}: {item!r} not found in {items!r}")


def expect_non_increasing(values: Iterable[Any], what: str) -> None:
    """Fail unless every value is greater than or equal to its successor."""
    values = list(values)
    for index, (current, following) in enumerate(zip(values, values[1:])):
        expect(
            current >= following,
            f"{what}: {current!r} at {index} is less than {following!r} after it",
        )
