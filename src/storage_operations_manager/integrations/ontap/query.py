"""Query parameter builder for ONTAP REST requests.

ONTAP filters collections with plain ``key=value`` parameters, projects fields
with the reserved ``fields`` parameter, and accepts ``a|b`` as "any of" for a
single filter key.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

FIELDS_PARAM = "fields"
VALUE_SEPARATOR = "|"


def _to_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Query:
    """Accumulates filters and a field projection for one request.

    ``set`` replaces a filter, ``add`` appends to a multi-valued filter and
    ``fields`` replaces the projection. Key names are not validated; the
    cluster rejects filters it does not know.

    Example:
        >>> query = Query()
        >>> query.set("destination.address", "10.0.0.0")
        >>> query.set("scope", "cluster")
        >>> query.fields(["destination", "gateway"])
        >>> query.to_params()
        {'destination.address': '10.0.0.0', 'scope': 'cluster', 'fields': 'destination,gateway'}
    """

    def __init__(self) -> None:
        self._filters: dict[str, list[str]] = {}
        self._fields: list[str] = []

    def set(self, key: str, value: Any) -> Query:
        self._filters[key] = [_to_param(value)]
        return self

    def add(self, key: str, value: Any) -> Query:
        values = self._filters.setdefault(key, [])
        param = _to_param(value)
        if param not in values:
            values.append(param)
        return self

    def fields(self, fields: Iterable[str]) -> Query:
        self._fields = list(dict.fromkeys(fields))
        return self

    def get(self, key: str) -> list[str] | None:
        """Return the values recorded for a filter key, or None."""
        values = self._filters.get(key)
        return list(values) if values is not None else None

    @property
    def projection(self) -> list[str]:
        return list(self._fields)

    def to_params(self) -> dict[str, str]:
        """Render the query as request parameters.

        Multi-valued filters are joined with ``|``; a non-empty projection is
        always emitted under ``fields``.
        """
        params = {key: VALUE_SEPARATOR.join(values) for key, values in self._filters.items()}
        if self._fields:
            params[FIELDS_PARAM] = ",".join(self._fields)
        return params

    def __bool__(self) -> bool:
        return bool(self._filters or self._fields)

    def __repr__(self) -> str:
        return f"Query({self.to_params()!r})"
