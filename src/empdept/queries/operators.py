"""Relational query operators over in-memory sequences.

Every operator is a pure function: it accepts any iterable, never mutates its
inputs, and returns a new tuple. Empty inputs and unmatched keys produce empty
results rather than errors.

Keys, values and fields may be given either as a field name (``"deptno"``) or
as a callable applied to each row (``lambda e: e.deptno``).

SQL to operator cheat sheet:

| SQL                                          | Operator           |
|----------------------------------------------|--------------------|
| ``WHERE JOB = 'SALESMAN'``                   | `where`            |
| ``ORDER BY SAL DESC``                        | `order_by`         |
| ``WHERE DEPTNO IN (SELECT ...)``             | `where_in`         |
| ``SELECT ENAME, SAL``                        | `select`           |
| ``JOIN DEPT ON E.DEPTNO = D.DEPTNO``         | `join`             |
| ``JOIN SALGRADE ON SAL BETWEEN LOSAL ...``   | `range_join`       |
| ``GROUP BY DEPTNO``                          | `group_by`         |
| ``SELECT DEPTNO, AVG(SAL) ... GROUP BY``     | `aggregate_by`     |
| ``WHERE SAL > (SELECT AVG(SAL) ... = E.X)``  | `where_correlated` |
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar

from .rows import Row, merge

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .aggregates import Aggregate

T = TypeVar("T")  # row type
L = TypeVar("L")  # left row type
R = TypeVar("R")  # right row type

Key: TypeAlias = str | Callable[[Any], Any]
Predicate: TypeAlias = Callable[[Any], bool]


def field_getter(name: str) -> Callable[[Any], Any]:
    """Return a callable reading field `name` from a record or a mapping.

    Mappings (including `Row`) are read by key, so a field called ``items`` or
    ``values`` is never confused with the mapping method of the same name.
    Other records are read as attributes.
    """

    def get(row: Any) -> Any:
        if isinstance(row, Mapping):
            return row[name]
        return getattr(row, name)

    return get


def key_func(key: Key) -> Callable[[Any], Any]:
    """Return a callable reading `key` from a row.

    A string names a field (see `field_getter`); a callable is used as-is.
    """
    if isinstance(key, str):
        return field_getter(key)
    return key


# ============================================================================
#                              Predicates
# ============================================================================


def is_absent(field: Key) -> Predicate:
    """Predicate matching rows where `field` is absent (``IS NULL``)."""
    get = key_func(field)
    return lambda row: get(row) is None


def is_present(field: Key) -> Predicate:
    """Predicate matching rows where `field` is present (``IS NOT NULL``).

    A present zero still matches; only ``None`` counts as absent.
    """
    get = key_func(field)
    return lambda row: get(row) is not None


# ============================================================================
#                           Filtering and ordering
# ============================================================================


def where(rows: Iterable[T], predicate: Predicate) -> tuple[T, ...]:
    """Keep the rows for which `predicate` holds, in input order."""
    return tuple(row for row in rows if predicate(row))


def where_in(rows: Iterable[T], key: Key, keys: Iterable[Hashable]) -> tuple[T, ...]:
    """Keep the rows whose `key` is a member of `keys`.

    `keys` is materialized once, typically from the result of a prior query.
    An absent key (``None``) never matches, as with SQL ``IN``.
    """
    members = set(keys)
    members.discard(None)
    get = key_func(key)
    return tuple(row for row in rows if get(row) in members)


def order_by(
    rows: Iterable[T], key: Key, *, descending: bool = False
) -> tuple[T, ...]:
    """Sort rows by `key`.

    The sort is stable in both directions: rows with equal keys keep their
    input order. Keys must be mutually comparable, so filter out absent values
    first when ordering by an optional field.
    """
    return tuple(sorted(rows, key=key_func(key), reverse=descending))


# ============================================================================
#                              Projection
# ============================================================================


def select(rows: Iterable[Any], *names: str, **computed: Key) -> tuple[Row, ...]:
    """Project each row onto the given fields.

    Args:
        rows: Input rows.
        *names: Fields copied as-is, in the given order.
        **computed: New fields, each computed from the row by a key.

    Returns:
        One `Row` per input row holding only the selected fields.

    Example:
        ``select(emps, "ename", annual=lambda e: e.sal * 12)``
    """
    getters = [(name, field_getter(name)) for name in names]
    getters.extend((name, key_func(key)) for name, key in computed.items())
    return tuple(Row({name: get(row) for name, get in getters}) for row in rows)


def select_many(
    rows: Iterable[Any], selector: Callable[[Any], Iterable[T]]
) -> tuple[T, ...]:
    """Flatten the sequences `selector` produces for each row, in order."""
    return tuple(item for row in rows for item in selector(row))


# ============================================================================
#                                 Joins
# ============================================================================


def join(
    left: Iterable[L],
    right: Iterable[R],
    left_key: Key,
    right_key: Key,
    result: Callable[[L, R], T] | None = None,
) -> tuple[T, ...] | tuple[Row, ...]:
    """Inner equi-join of two sequences.

    Produces one record for every (left, right) pair with equal keys, ordered
    by left row and then by right row. Rows without a partner on the other
    side are dropped, and absent keys (``None``) never match.

    Args:
        left: Outer sequence (e.g. EMP).
        right: Inner sequence (e.g. DEPT).
        left_key: Join key of the left rows.
        right_key: Join key of the right rows.
        result: Combines a matching pair. Defaults to `merge`, a `Row` with
            the fields of both records.
    """
    combine = result or merge
    get_left = key_func(left_key)
    get_right = key_func(right_key)

    index: dict[Hashable, list[R]] = {}
    for row in right:
        if (value := get_right(row)) is not None:
            index.setdefault(value, []).append(row)

    return tuple(
        combine(outer, inner)
        for outer in left
        for inner in index.get(get_left(outer), ())
    )


def range_join(  # pylint: disable=too-many-arguments
    left: Iterable[L],
    right: Iterable[R],
    value: Key,
    low: Key,
    high: Key,
    result: Callable[[L, R], T] | None = None,
) -> tuple[T, ...] | tuple[Row, ...]:
    """Join each left row to every right row whose band contains its value.

    The band is inclusive on both ends (``value BETWEEN low AND high``). A left
    row inside several bands yields several records and a row inside none
    yields nothing; no de-duplication is done. Whether the bands are disjoint
    is the caller's concern.

    Args:
        left: Rows carrying the scalar (e.g. EMP).
        right: Rows carrying the bands (e.g. SALGRADE).
        value: Scalar of the left rows (e.g. ``"sal"``).
        low: Lower bound of the right rows (e.g. ``"losal"``).
        high: Upper bound of the right rows (e.g. ``"hisal"``).
        result: Combines a matching pair; defaults to `merge`.
    """
    combine = result or merge
    get_value = key_func(value)
    get_low = key_func(low)
    get_high = key_func(high)
    bands = tuple(right)

    return tuple(
        combine(outer, band)
        for outer in left
        if (amount := get_value(outer)) is not None
        for band in bands
        if get_low(band) <= amount <= get_high(band)
    )


# ============================================================================
#                          Grouping and aggregation
# ============================================================================


@dataclass(frozen=True, slots=True)
class Grouping(Generic[T]):
    """Rows sharing one key, in input order."""

    key: Any
    items: tuple[T, ...]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def group_by(rows: Iterable[T], key: Key) -> tuple[Grouping[T], ...]:
    """Partition rows by key equality.

    Groups are ordered by the first occurrence of their key, and rows keep
    their input order within a group.
    """
    get = key_func(key)
    groups: dict[Hashable, list[T]] = {}
    for row in rows:
        groups.setdefault(get(row), []).append(row)
    return tuple(Grouping(k, tuple(items)) for k, items in groups.items())


def aggregate_by(
    rows: Iterable[Any],
    key: Key,
    *,
    key_name: str | None = None,
    **aggregates: Aggregate,
) -> tuple[Row, ...]:
    """Group rows and compute one row of aggregates per group.

    Args:
        rows: Input rows.
        key: Grouping key.
        key_name: Name of the key field in the output. Defaults to `key` when
            it is a field name, otherwise ``"key"``.
        **aggregates: Output field name to aggregate, e.g.
            ``avg_sal=average("sal")``.

    Returns:
        One `Row` per group, in order of first key occurrence.

    Example:
        ``aggregate_by(emps, "deptno", headcount=count())``
    """
    if key_name is None:
        key_name = key if isinstance(key, str) else "key"
    return tuple(
        Row(
            {key_name: group.key},
            **{name: aggregate(group.items) for name, aggregate in aggregates.items()},
        )
        for group in group_by(rows, key)
    )


def where_correlated(
    rows: Iterable[T],
    group_key: Key,
    subquery: Callable[[Sequence[T]], Any],
    compare: Callable[[T, Any], bool],
) -> tuple[T, ...]:
    """Filter rows against a scalar computed over their own group.

    For each row, `subquery` is evaluated over all rows sharing the row's
    `group_key` and the row is kept when ``compare(row, scalar)`` holds. This
    is the in-memory form of::

        SELECT * FROM EMP E
        WHERE E.SAL > (SELECT AVG(SAL) FROM EMP WHERE DEPTNO = E.DEPTNO)

    The scalar depends only on the group key, so it is computed once per
    distinct key instead of once per row.

    Args:
        rows: Input rows.
        group_key: Correlation key (e.g. ``"deptno"``).
        subquery: Scalar over a group's rows (e.g. ``average("sal")``).
        compare: Decides whether to keep a row given its group's scalar.
    """
    rows = tuple(rows)
    scalars = {
        group.key: subquery(group.items) for group in group_by(rows, group_key)
    }
    get = key_func(group_key)
    return tuple(row for row in rows if compare(row, scalars[get(row)]))
