"""Composable query operators for in-memory tables.

The operators are plain functions (`where`, `join`, `group_by`, ...) that can
be used directly or chained through the `Query` wrapper.
"""

from .aggregates import average, count, maximum, minimum, total
from .operators import (
    Grouping,
    aggregate_by,
    group_by,
    is_absent,
    is_present,
    join,
    order_by,
    range_join,
    select,
    select_many,
    where,
    where_correlated,
    where_in,
)
from .query import Query
from .rows import Row

__all__ = [
    "Query",
    "Row",
    "Grouping",
    "where",
    "where_in",
    "where_correlated",
    "order_by",
    "select",
    "select_many",
    "join",
    "range_join",
    "group_by",
    "aggregate_by",
    "is_absent",
    "is_present",
    "count",
    "total",
    "average",
    "minimum",
    "maximum",
]
