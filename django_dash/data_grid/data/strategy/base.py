from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from django_dash.data_grid.data.field import Field, FieldCollection


class DataStrategy(ABC):
    """Converts raw records into a :class:`DataCollection`."""

    @abstractmethod
    def convert_records_to_data_collection(self, records: Iterable[Mapping[str, Any]], data_grid):
        raise NotImplementedError

    @staticmethod
    def build_row(record: Mapping[str, Any], field_definitions) -> FieldCollection:
        """Transform one record through every field definition.

        Hidden fields are transformed too; they are dropped at render time.
        """
        frozen = MappingProxyType(dict(record))
        row = FieldCollection()
        for definition in field_definitions:
            name = definition.get_name()
            row.add_data(
                Field(
                    name=name,
                    value=definition.transform_data(frozen.get(name), frozen),
                    label=definition.get_title(),
                    visible=definition.is_visible(),
                )
            )
        return row
