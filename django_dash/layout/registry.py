"""Explicit registry mapping layout identifiers to layout classes."""
from __future__ import annotations

from typing import Dict, List, Tuple, Type

from django_dash.exceptions import UnknownLayoutError
from django_dash.layout.base import BaseLayout
from django_dash.layout.grid_layout import GridLayout
from django_dash.layout.one_stat_layout import OneStatLayout


def _normalize(identifier: str) -> str:
    return str(identifier).replace("_", "").replace("-", "").strip().lower()


class LayoutRegistry:
    """Store layout classes by identifier.

    Identifiers are matched ignoring case, ``_`` and ``-`` so saved values
    such as ``one_stat`` and ``OneStat`` resolve to the same layout.
    """

    def __init__(self):
        self._layouts: Dict[str, Type[BaseLayout]] = {}

    def register(self, layout_class: Type[BaseLayout]) -> None:
        if not (isinstance(layout_class, type) and issubclass(layout_class, BaseLayout)):
            raise TypeError("layout_class must subclass BaseLayout")
        key = _normalize(layout_class.identifier)
        if not key:
            raise ValueError(f"{layout_class.__name__} has no identifier")
        if key in self._layouts:
            raise ValueError(f"Layout '{layout_class.identifier}' is already registered")
        self._layouts[key] = layout_class

    def get(self, identifier: str) -> Type[BaseLayout]:
        try:
            return self._layouts[_normalize(identifier)]
        except KeyError:
            raise UnknownLayoutError(f"Unknown layout '{identifier}'") from None

    def all(self) -> Dict[str, Type[BaseLayout]]:
        return {cls.identifier: cls for cls in self._layouts.values()}

    def choices(self) -> List[Tuple[str, str]]:
        return [(cls.identifier, str(cls.verbose_name or cls.identifier)) for cls in self._layouts.values()]


layout_registry = LayoutRegistry()
layout_registry.register(GridLayout)
layout_registry.register(OneStatLayout)


__all__ = ["LayoutRegistry", "layout_registry"]
