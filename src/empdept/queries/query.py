"""Fluent wrapper chaining the query operators over one sequence."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, TypeVar, overload

from . import operators as ops

if TYPE_CHECKING:
    from .aggregates import Aggregate
    from .operators import Grouping, Key, Predicate
    from .rows import Row

T = TypeVar("T")
U = TypeVar("U")


class Query(Sequence[T]):
    """An immutable, ordered sequence with chainable query operators.

    Each method applies the operator of the same name from
    `empdept.queries.operators` and wraps the result in a new `Query`, so a
    SQL statement reads top to bottom::

        (
            Query(store.employees())
            .where(lambda e: e.deptno == 30)
            .order_by("sal", descending=True)
            .to_list()
        )
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[T] = ()) -> None:
        self._rows: tuple[T, ...] = tuple(rows)

    # --- Sequence protocol ---

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Query[T]: ...

    def __getitem__(self, index: int | slice) -> T | Query[T]:
        if isinstance(index, slice):
            return Query(self._rows[index])
        return self._rows[index]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Query):
            return self._rows == other._rows
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Query({list(self._rows)!r})"

    # --- Operators ---

    def where(self, predicate: Predicate) -> Query[T]:
        """Keep rows matching `predicate`."""
        return Query(ops.where(self._rows, predicate))

    def where_in(self, key: Key, keys: Iterable[Hashable]) -> Query[T]:
        """Keep rows whose `key` is one of `keys`."""
        return Query(ops.where_in(self._rows, key, keys))

    def where_correlated(
        self,
        group_key: Key,
        subquery: Callable[[Sequence[T]], Any],
        compare: Callable[[T, Any], bool],
    ) -> Query[T]:
        """Keep rows that compare favourably with a scalar over their group."""
        return Query(ops.where_correlated(self._rows, group_key, subquery, compare))

    def order_by(self, key: Key, *, descending: bool = False) -> Query[T]:
        """Stable sort by `key`."""
        return Query(ops.order_by(self._rows, key, descending=descending))

    def select(self, *names: str, **computed: Key) -> Query[Row]:
        """Project rows onto the given fields."""
        return Query(ops.select(self._rows, *names, **computed))

    def select_many(self, selector: Callable[[T], Iterable[U]]) -> Query[U]:
        """Flatten the sequences produced per row."""
        return Query(ops.select_many(self._rows, selector))

    def join(
        self,
        right: Iterable[Any],
        left_key: Key,
        right_key: Key,
        result: Callable[[T, Any], U] | None = None,
    ) -> Query[Any]:
        """Inner equi-join with `right`."""
        return Query(ops.join(self._rows, right, left_key, right_key, result))

    def range_join(  # pylint: disable=too-many-arguments
        self,
        right: Iterable[Any],
        value: Key,
        low: Key,
        high: Key,
        result: Callable[[T, Any], U] | None = None,
    ) -> Query[Any]:
        """Join each row to the bands of `right` containing its value."""
        return Query(ops.range_join(self._rows, right, value, low, high, result))

    def group_by(self, key: Key) -> Query[Grouping[T]]:
        """Partition rows by `key` in order of first occurrence."""
        return Query(ops.group_by(self._rows, key))

    def aggregate_by(
        self, key: Key, *, key_name: str | None = None, **aggregates: Aggregate
    ) -> Query[Row]:
        """One row of aggregates per group."""
        return Query(
            ops.aggregate_by(self._rows, key, key_name=key_name, **aggregates)
        )

    # --- Terminal operations ---

    def to_list(self) -> list[T]:
        """Materialize the rows as a new list."""
        return list(self._rows)

    def to_tuple(self) -> tuple[T, ...]:
        """Return the rows as a tuple."""
        return self._rows

    def first(self, predicate: Predicate | None = None, default: Any = None) -> Any:
        """Return the first row (matching `predicate`), or `default`."""
        return next(
            (row for row in self._rows if predicate is None or predicate(row)),
            default,
        )

    def any(self, predicate: Predicate | None = None) -> bool:
        """Return True if some row matches (or, without predicate, if non-empty)."""
        if predicate is None:
            return bool(self._rows)
        return any(predicate(row) for row in self._rows)

    def all(self, predicate: Predicate) -> bool:
        """Return True if every row matches; vacuously True when empty."""
        return all(predicate(row) for row in self._rows)

    def count(self, value: Any = None) -> int:  # pylint: disable=arguments-renamed
        """Number of rows, or occurrences of `value` when one is given."""
        if value is None:
            return len(self._rows)
        return self._rows.count(value)

    def contains(self, value: Any) -> bool:
        """Return True if some row equals `value`."""
        return value in self._rows
