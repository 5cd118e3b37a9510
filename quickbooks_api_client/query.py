"""
Builder for the QuickBooks query language.

The query endpoint accepts a restricted SQL dialect::

    SELECT * FROM <entity> MAXRESULTS <n> STARTPOSITION <p> [WHERE ...] [ORDERBY ...]

Only the pagination bounds are checked here.  ``where`` and
``order_by`` are inserted verbatim and escaping them is the caller's
responsibility.
"""

from __future__ import annotations

from typing import Optional

from .constants import MAX_QUERY_LENGTH
from .exceptions import PreconditionError
from .models import QueryConfig


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a valid bound
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionError(f"{name} must be an integer, got {value!r}")
    return value


def build_query_string(resource_key: str, config: Optional[QueryConfig] = None) -> str:
    """Return the query string selecting one page of ``resource_key``.

    Parameters
    ----------
    resource_key : str
        Entity name such as ``"Customer"`` or ``"Item"``; inserted as is.
    config : QueryConfig, optional
        Filter, ordering and page window.  Defaults to the first page of
        :data:`MAX_QUERY_LENGTH` rows.

    Raises
    ------
    PreconditionError
        If ``start_position`` is below 1 or ``max_results`` is below 1.
        ``max_results`` above :data:`MAX_QUERY_LENGTH` is clamped.
    """
    if config is None:
        config = QueryConfig()

    start_position = _require_int("start_position", config.start_position)
    if start_position < 1:
        raise PreconditionError(
            f"start_position is 1-based and must be at least 1, got {start_position}"
        )
    max_results = _require_int("max_results", config.max_results)
    if max_results < 1:
        raise PreconditionError(f"max_results must be at least 1, got {max_results}")
    max_results = min(max_results, MAX_QUERY_LENGTH)

    query = (
        f"SELECT * FROM {resource_key} MAXRESULTS {max_results} "
        f"STARTPOSITION {start_position}"
    )
    if config.where:
        query += f" WHERE {config.where}"
    if config.order_by:
        query += f" ORDERBY {config.order_by}"
    return query
