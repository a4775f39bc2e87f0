"""Query + field definitions + pagination aggregate executed against storage."""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from django.core.paginator import Paginator

from django_dash.conf import settings
from django_dash.data_grid.data.strategy import DataStrategy, StandardStrategy
from django_dash.data_grid.field.field_definition import FieldDefinition
from django_dash.data_grid.filter.filter_collection import FilterCollection
from django_dash.data_grid.record_source import RecordSet, RecordSource, SqlRecordSource
from django_dash.exceptions import DashConfigurationError

log = logging.getLogger(__name__)

SELECT_PLACEHOLDER = "%%SELECT%%"
WHERE_PLACEHOLDER = "%%WHERE%%"
ORDERBY_PLACEHOLDER = "%%ORDERBY%%"


class DataGrid:
    """Builds and runs the query for one data source.

    The query template is SQL containing ``%%SELECT%%`` (replaced with the
    field definitions' select list) and ``%%WHERE%%`` (replaced with
    ``WHERE ...`` built from the filter collection, or nothing). An optional
    ``%%ORDERBY%%`` marks where sorting goes; otherwise it is appended.
    """

    def __init__(self, context, record_source: Optional[RecordSource] = None):
        self.context = context
        self.record_source = record_source or SqlRecordSource(settings.DASH_DATABASE)
        self._strategy: DataStrategy = StandardStrategy()
        self._query_template: Optional[str] = None
        self._field_definitions: List[FieldDefinition] = []
        self._supports_pagination = False
        self._filter_collection: Optional[FilterCollection] = None
        self._per_page = settings.DASH_PER_PAGE
        self._page_number: Any = 1
        self._limit: Optional[int] = None
        self._sorting: List[Tuple[str, str]] = []
        self._initialized = False
        self._paginator = None
        self._page = None
        self._data = None

    def get_context(self):
        return self.context

    # ----- setup --------------------------------------------------------------
    def set_query_template(self, query_template: str) -> None:
        self._query_template = query_template

    def get_query_template(self) -> Optional[str]:
        return self._query_template

    def set_field_definitions(self, field_definitions: Sequence[FieldDefinition]) -> None:
        self._field_definitions = list(field_definitions or [])

    def get_field_definitions(self) -> List[FieldDefinition]:
        return list(self._field_definitions)

    def get_field_definition(self, name: str) -> Optional[FieldDefinition]:
        for definition in self._field_definitions:
            if definition.get_name() == name:
                return definition
        return None

    def set_supports_pagination(self, supports_pagination: bool) -> None:
        self._supports_pagination = bool(supports_pagination)

    def supports_pagination(self) -> bool:
        return self._supports_pagination

    def set_filter_collection(self, filter_collection: FilterCollection) -> None:
        self._filter_collection = filter_collection

    def get_filter_collection(self) -> Optional[FilterCollection]:
        return self._filter_collection

    def set_strategy(self, strategy: DataStrategy) -> None:
        self._strategy = strategy

    def get_strategy(self) -> DataStrategy:
        return self._strategy

    def set_per_page(self, per_page) -> None:
        try:
            per_page = int(per_page)
        except (TypeError, ValueError):
            return
        if per_page > 0:
            self._per_page = per_page

    def get_per_page(self) -> int:
        return self._per_page

    def set_page_number(self, page_number) -> None:
        self._page_number = page_number or 1

    def set_limit(self, limit: Optional[int]) -> None:
        """Cap the number of records fetched when the grid is not paginated."""
        self._limit = limit

    def get_limit(self) -> Optional[int]:
        return self._limit

    def add_sorting(self, name: str, direction: str = "ASC") -> None:
        direction = (direction or "ASC").upper()
        if direction not in {"ASC", "DESC"}:
            raise DashConfigurationError(f"Invalid sort direction '{direction}' for {name}")
        if self.get_field_definition(name) is None:
            raise DashConfigurationError(f"Cannot sort on unknown field '{name}'")
        self._sorting.append((name, direction))

    def init(self) -> None:
        """Validate the query template and field definitions."""
        template = self._query_template
        if not isinstance(template, str) or not template.strip():
            raise DashConfigurationError("Data grid query template is empty.")
        for placeholder in (SELECT_PLACEHOLDER, WHERE_PLACEHOLDER):
            if placeholder not in template:
                raise DashConfigurationError(f"Data grid query template is missing {placeholder}.")
        if not self._field_definitions:
            raise DashConfigurationError("Data grid has no field definitions.")
        names = set()
        for definition in self._field_definitions:
            if not isinstance(definition, FieldDefinition):
                raise DashConfigurationError(f"{definition!r} is not a FieldDefinition.")
            if not definition.get_select():
                raise DashConfigurationError(f"Field definition '{definition.get_name()}' has no select.")
            if definition.get_name() in names:
                raise DashConfigurationError(f"Duplicate field definition '{definition.get_name()}'.")
            names.add(definition.get_name())
        self._initialized = True

    # ----- query --------------------------------------------------------------
    def get_query(self, include_order: bool = True) -> Tuple[str, List[Any]]:
        if not self._initialized:
            self.init()
        quote = self.record_source.quote_name
        select = ", ".join(
            f"{definition.get_select()} AS {quote(definition.get_name())}"
            for definition in self._field_definitions
        )
        where, params = ("", [])
        if self._filter_collection is not None:
            where, params = self._filter_collection.get_sql_and_params()
        sql = self._query_template.replace(SELECT_PLACEHOLDER, select)
        sql = sql.replace(WHERE_PLACEHOLDER, f"WHERE {where}" if where else "")
        order = ""
        if include_order and self._sorting:
            order = "ORDER BY " + ", ".join(f"{quote(name)} {direction}" for name, direction in self._sorting)
        if ORDERBY_PLACEHOLDER in sql:
            sql = sql.replace(ORDERBY_PLACEHOLDER, order)
        elif order:
            sql = f"{sql} {order}"
        return sql.strip(), params

    def get_paginator(self) -> Paginator:
        if self._paginator is None:
            sql, params = self.get_query()
            count_sql, _ = self.get_query(include_order=False)
            records = RecordSet(self.record_source, sql, params, count_sql=count_sql)
            self._paginator = Paginator(records, self._per_page)
        return self._paginator

    def get_page(self):
        if self._page is None:
            self._page = self.get_paginator().get_page(self._page_number)
        return self._page

    def get_data(self):
        """Fetch and convert records once; later calls return the cached collection."""
        if self._data is None:
            if self.supports_pagination():
                records = list(self.get_page().object_list)
            else:
                sql, params = self.get_query()
                records = self.record_source.fetch(sql, params, limit=self._limit)
            log.debug("Converting %d records with %s", len(records), type(self._strategy).__name__)
            self._data = self._strategy.convert_records_to_data_collection(records, self)
        return self._data
