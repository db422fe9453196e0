"""
Query clause parsing for list endpoints.

List endpoints accept four query parameters:

* ``count`` – maximum number of entities to return;
* ``offsetId`` – number of entities to skip;
* ``sort`` – field to sort by;
* ``sortOrder`` – ``asc`` or ``desc`` (case insensitive).

``sort`` and ``sortOrder`` only make sense together.  Anything else in
the query string is rejected so that typos do not silently return the
unfiltered collection.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from .exceptions import InvalidParameterValue, PairedParameterMissing, UnrecognizedParameter

COUNT = "count"
OFFSET = "offsetId"
SORT = "sort"
SORT_ORDER = "sortOrder"

RECOGNIZED_PARAMETERS = (COUNT, OFFSET, SORT, SORT_ORDER)

# Largest value a BSON int64 (MongoDB limit/skip) can carry.
MAX_INT64 = 2**63 - 1


class SortDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class QueryClause:
    """Sort and pagination request for a list operation.

    The default clause (no limit, no skip, no sort field) means "return
    every entity in storage order".
    """

    limit: Optional[int] = None
    skip: Optional[int] = None
    sort_field: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC


def _non_negative_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidParameterValue(name, raw, "expected an integer") from None
    if value < 0:
        raise InvalidParameterValue(name, raw, "must not be negative")
    if value > MAX_INT64:
        raise InvalidParameterValue(name, raw, "too large")
    return value


def build_clause(
    params: Mapping[str, str],
    sortable: Optional[Iterable[str]] = None,
) -> QueryClause:
    """Turn raw query parameters into a :class:`QueryClause`.

    Parameters
    ----------
    params : Mapping[str, str]
        Query parameter names mapped to their (last) value.
    sortable : Optional[Iterable[str]]
        Field names the caller allows sorting on.  ``None`` accepts any
        field name.

    Raises
    ------
    UnrecognizedParameter
        A parameter outside ``count``/``offsetId``/``sort``/``sortOrder``.
    PairedParameterMissing
        Only one of ``sort`` and ``sortOrder`` was given.
    InvalidParameterValue
        A malformed integer, direction or sort field.
    """
    for name in params:
        if name not in RECOGNIZED_PARAMETERS:
            raise UnrecognizedParameter(name)

    limit = _non_negative_int(COUNT, params[COUNT]) if COUNT in params else None
    skip = _non_negative_int(OFFSET, params[OFFSET]) if OFFSET in params else None

    has_sort, has_order = SORT in params, SORT_ORDER in params
    if has_sort != has_order:
        raise PairedParameterMissing(SORT, SORT_ORDER)
    if not has_sort:
        return QueryClause(limit=limit, skip=skip)

    sort_field = params[SORT]
    if not sort_field:
        raise InvalidParameterValue(SORT, sort_field, "empty field name")
    if sortable is not None and sort_field not in set(sortable):
        raise InvalidParameterValue(SORT, sort_field, "unknown field")
    try:
        direction = SortDirection(params[SORT_ORDER].lower())
    except ValueError:
        raise InvalidParameterValue(SORT_ORDER, params[SORT_ORDER], "expected asc or desc") from None
    return QueryClause(limit=limit, skip=skip, sort_field=sort_field, sort_direction=direction)
