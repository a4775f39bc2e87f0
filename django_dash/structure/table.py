from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from django_dash.data_grid.field.field_definition import FieldDefinition


class Table(ABC):
    """A database table a data source selects from.

    Fields returned by :meth:`get_fields` select columns qualified with the
    table alias so several tables can be joined in one query template.
    """

    @abstractmethod
    def get_title(self) -> str:
        """Human readable title for the table."""

    @abstractmethod
    def get_table_name(self) -> str:
        """Name of the table in the database."""

    @abstractmethod
    def get_alias(self) -> str:
        """Unique alias used in query templates."""

    @abstractmethod
    def get_fields(self) -> List[FieldDefinition]:
        raise NotImplementedError

    def column(self, name: str) -> str:
        return f"{self.get_alias()}.{name}"
