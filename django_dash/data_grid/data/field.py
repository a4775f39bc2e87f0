from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional


@dataclass
class Field:
    """A single display-ready cell."""

    name: str
    value: Any
    label: str = ""
    visible: bool = True


class FieldCollection:
    """The fields of one row, in field-definition order."""

    def __init__(self):
        self._fields: Dict[str, Field] = {}

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def add_data(self, field: Field) -> None:
        self._fields[field.name] = field

    def get(self, name: str) -> Optional[Field]:
        return self._fields.get(name)

    def get_data(self) -> List[Field]:
        return list(self._fields.values())

    def get_visible_fields(self) -> List[Field]:
        return [f for f in self._fields.values() if f.visible]

    def to_dict(self, visible_only: bool = False) -> Dict[str, Any]:
        fields = self.get_visible_fields() if visible_only else self.get_data()
        return {f.name: f.value for f in fields}
