"""Pluggable behaviour attached to field definitions."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

EMPTY_VALUE = "-"


class FieldAttribute(ABC):
    """Transforms a field value after records are fetched.

    Attributes are chained: each receives the output of the previous one.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self._options: Dict[str, Any] = dict(options or {})
        self.field_definition = None

    def set_field_definition(self, field_definition) -> None:
        self.field_definition = field_definition

    def get_option(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)

    def set_option(self, name: str, value: Any) -> None:
        self._options[name] = value

    def get_options(self) -> Dict[str, Any]:
        return dict(self._options)

    @abstractmethod
    def transform_data(self, data: Any, record: Mapping[str, Any]) -> Any:
        """Return the transformed value; ``record`` must not be modified."""
