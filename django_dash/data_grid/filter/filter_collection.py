from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from django.core.exceptions import ValidationError

from django_dash.data_grid.filter.filter import Filter

log = logging.getLogger(__name__)


class FilterCollection:
    """Ordered set of filters keyed by name."""

    def __init__(self, name: str = ""):
        self.name = name
        self._filters: Dict[str, Filter] = {}

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self):
        return iter(self._filters.values())

    def add_filter(self, filter: Filter) -> None:
        if filter.get_name() in self._filters:
            raise ValueError(f"Filter '{filter.get_name()}' is already in the collection")
        self._filters[filter.get_name()] = filter

    def has_filter(self, name: str) -> bool:
        return name in self._filters

    def get_filter(self, name: str) -> Optional[Filter]:
        return self._filters.get(name)

    def remove_filter(self, filter: Union[Filter, str]) -> None:
        """Remove ``filter`` (instance or name). Absent filters are ignored."""
        name = filter.get_name() if isinstance(filter, Filter) else filter
        self._filters.pop(name, None)

    def get_filters(self) -> List[Filter]:
        return list(self._filters.values())

    def get_user_filters(self) -> List[Filter]:
        """Filters an end user may set or disable (everything but conditions)."""
        return [f for f in self._filters.values() if not f.required]

    def has_filters(self) -> bool:
        return bool(self._filters)

    def apply_values(self, values: Mapping[str, Any]) -> None:
        """Set cleaned raw values on user filters.

        Unknown names and values the filter's form field rejects are ignored.
        """
        for name, value in (values or {}).items():
            filter = self.get_filter(name)
            if filter is None or filter.required:
                log.debug("Ignoring value for unknown filter %s", name)
                continue
            try:
                value = filter.clean_value(value)
            except ValidationError:
                log.debug("Ignoring invalid value for filter %s: %r", name, value)
                continue
            filter.set_raw_value(value)

    def get_sql_and_params(self) -> Tuple[str, List[Any]]:
        """Combine every applicable filter into one ``AND`` expression."""
        clauses, params = [], []
        for filter in self._filters.values():
            if not filter.has_raw_value():
                continue
            sql, filter_params = filter.get_sql_and_params()
            if sql:
                clauses.append(f"({sql})")
                params.extend(filter_params)
        return " AND ".join(clauses), params
