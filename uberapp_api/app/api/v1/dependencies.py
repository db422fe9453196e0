"""Request‑level dependencies shared by the v1 endpoints."""

from typing import Callable

from fastapi import Request

from ...core.query import QueryClause, build_clause
from ...core.resources import ResourceRules


def clause_dependency(rules: ResourceRules) -> Callable[[Request], QueryClause]:
    """Build a dependency parsing the list query string of one resource.

    Sorting is limited to the resource's own fields.  Parse errors are
    raised as ``QueryError`` subclasses and rendered by the app's
    exception handler.
    """
    sortable = rules.sortable

    def _clause(request: Request) -> QueryClause:
        return build_clause(dict(request.query_params), sortable=sortable)

    return _clause
