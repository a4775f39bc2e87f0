"""Field definitions describe a selectable output column of a data grid."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from django_dash.data_grid.field.attribute.base import EMPTY_VALUE, FieldAttribute


class FieldDefinition:
    """A predefined field that can be added to a data grid.

    ``select`` is the SQL expression selected into the query under ``name``.
    After records are retrieved each field has a chance to transform the raw
    value through its attributes (e.g. unix timestamp to a readable date).
    """

    VISIBILITY_VISIBLE = 1
    VISIBILITY_HIDDEN = 0

    DEFAULT_EMPTY_VALUE = EMPTY_VALUE

    def __init__(
        self,
        name: str,
        select: str,
        title: str = "",
        visibility: int = VISIBILITY_VISIBLE,
        options: Optional[Mapping[str, Any]] = None,
        attributes: Optional[Iterable[FieldAttribute]] = None,
    ):
        self.name = name
        self.select = select
        self.title = title or name.replace("_", " ").title()
        self._visibility = self.VISIBILITY_VISIBLE
        self.set_visibility(visibility)
        self._options: Dict[str, Any] = dict(options or {})
        self._attributes: List[FieldAttribute] = []
        for attribute in attributes or ():
            self.add_attribute(attribute)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    def transform_data(self, data: Any, record: Mapping[str, Any]) -> Any:
        """Return the display value for ``data`` taken from ``record``.

        Attributes are applied in the order they were added. The record is
        never modified.
        """
        for attribute in self._attributes:
            data = attribute.transform_data(data, record)
        return data

    def get_name(self) -> str:
        return self.name

    def get_title(self) -> str:
        return self.title

    def get_select(self) -> str:
        return self.select

    # ----- visibility ---------------------------------------------------------
    def get_visibility(self) -> int:
        return self._visibility

    def set_visibility(self, visibility) -> None:
        """Accepts the constants or any truthy/falsy value (e.g. ``"0"``)."""
        if isinstance(visibility, str):
            visibility = visibility.strip().lower() not in {"", "0", "false", "no", "off"}
        self._visibility = self.VISIBILITY_VISIBLE if visibility else self.VISIBILITY_HIDDEN

    def is_visible(self) -> bool:
        return self._visibility == self.VISIBILITY_VISIBLE

    # ----- attributes ---------------------------------------------------------
    def add_attribute(self, attribute: FieldAttribute) -> None:
        if not isinstance(attribute, FieldAttribute):
            raise TypeError("attribute must subclass FieldAttribute")
        attribute.set_field_definition(self)
        self._attributes.append(attribute)

    def remove_attribute(self, attribute: FieldAttribute) -> None:
        if attribute in self._attributes:
            self._attributes.remove(attribute)

    def get_attributes(self) -> List[FieldAttribute]:
        return list(self._attributes)

    def has_attribute(self, attribute_class: type) -> bool:
        return any(isinstance(a, attribute_class) for a in self._attributes)

    # ----- options ------------------------------------------------------------
    def get_option(self, name: str) -> Any:
        return self._options.get(name)

    def set_option(self, name: str, value: Any) -> None:
        self._options[name] = value

    def set_options(self, options: Mapping[str, Any]) -> None:
        for name, value in (options or {}).items():
            self.set_option(name, value)

    def get_options(self) -> Dict[str, Any]:
        return dict(self._options)
