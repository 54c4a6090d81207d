"""Lightweight projection records produced by query operators."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import fields, is_dataclass
from typing import Any


class Row(Mapping[str, Any]):
    """Immutable, ordered set of named fields with attribute access.

    Rows stand in for ad-hoc projections such as ``SELECT ENAME, SAL``. Fields
    are readable both as attributes (``row.ename``) and as keys
    (``row["ename"]``). Two rows are equal when they hold the same fields with
    equal values; a row also compares equal to a plain ``dict`` with the same
    content. Rows holding hashable values are hashable, so query results can
    be put in sets or hashed as a whole.

    Fields named like mapping methods (``items``, ``values``, ``keys``,
    ``get``) are only reachable by key; operators always read fields by key.

    Example:
        >>> row = Row(ename="ALLEN", grade=3)
        >>> row.grade
        3
        >>> dict(row)
        {'ename': 'ALLEN', 'grade': 3}
    """

    __slots__ = ("_fields",)

    _fields: dict[str, Any]

    def __init__(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any):
        data = dict(values) if values is not None else {}
        data.update(kwargs)
        object.__setattr__(self, "_fields", data)

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getattr__(self, name: str) -> Any:
        if name == "_fields":  # not yet initialized (e.g. during copy)
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError as e:
            raise AttributeError(
                f"{type(self).__name__!s} has no field {name!r}"
            ) from e

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __hash__(self) -> int:
        # Mapping equality ignores field order, so the hash must too.
        return hash(frozenset(self._fields.items()))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self._fields.items())
        return f"{type(self).__name__}({body})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._fields,))


def fields_of(record: Any) -> dict[str, Any]:
    """Return the named fields of a record as a new ordered ``dict``.

    Accepts dataclass instances (e.g. ``Employee``), rows and other mappings.

    Raises:
        TypeError: If `record` is neither a dataclass instance nor a mapping.
    """
    if isinstance(record, Mapping):
        return dict(record)
    if is_dataclass(record) and not isinstance(record, type):
        return {field.name: getattr(record, field.name) for field in fields(record)}
    raise TypeError(f"Cannot read fields from {type(record).__name__}")


def merge(left: Any, right: Any) -> Row:
    """Combine two records into one row.

    Fields of `right` are appended after those of `left`; a field already
    defined by `left` keeps the left value (e.g. the shared ``deptno`` of an
    EMP/DEPT join).
    """
    combined = fields_of(left)
    for name, value in fields_of(right).items():
        combined.setdefault(name, value)
    return Row(combined)
