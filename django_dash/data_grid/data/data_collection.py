from __future__ import annotations

from typing import Dict, Iterator, List

from django_dash.data_grid.data.field import FieldCollection


class DataCollection:
    """Display-ready rows produced by a data strategy.

    A collection may also hold named child collections (e.g. one per group).
    """

    def __init__(self):
        self._rows: List[FieldCollection] = []
        self._children: Dict[str, "DataCollection"] = {}

    def __iter__(self) -> Iterator[FieldCollection]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def add_row(self, row: FieldCollection) -> None:
        self._rows.append(row)

    def get_rows(self) -> List[FieldCollection]:
        return list(self._rows)

    def first(self):
        return self._rows[0] if self._rows else None

    def add_child_collection(self, name: str, collection: "DataCollection") -> None:
        self._children[name] = collection

    def get_child_collection(self, name: str):
        return self._children.get(name)

    def get_child_collections(self) -> Dict[str, "DataCollection"]:
        return dict(self._children)

    def has_child_collections(self) -> bool:
        return bool(self._children)

    def to_list(self, visible_only: bool = True) -> List[dict]:
        return [row.to_dict(visible_only=visible_only) for row in self._rows]
