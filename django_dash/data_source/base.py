"""Data sources orchestrate grid, filters, layout and preferences for a block."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from django import forms
from django.utils.translation import gettext_lazy as _

from django_dash.conf import settings
from django_dash.data_grid.data_grid import DataGrid
from django_dash.data_grid.field.field_definition import FieldDefinition
from django_dash.data_grid.filter.filter_collection import FilterCollection
from django_dash.layout.registry import layout_registry

log = logging.getLogger(__name__)


class BaseDataSource(ABC):
    """Produces a display-ready data collection for one dashboard block.

    Subclasses supply the query template, the available field definitions
    and the filter collection. Everything else is built lazily and cached
    for the lifetime of the instance, which is a single request.

    Preferences are the saved block settings. Recognised keys:

    - ``layout``: layout identifier, defaults to ``DASH_DEFAULT_LAYOUT``
    - ``available_fields``: ``{field_name: {"visible": bool}}``, in display order
    - ``filters``: ``{filter_name: {"enabled": bool}}``
    """

    verbose_name = ""

    def __init__(self, context, record_source=None):
        self._context = context
        self._record_source = record_source
        self._preferences: Dict[str, Any] = {}
        self._reset()

    def _reset(self) -> None:
        self._data_grid: Optional[DataGrid] = None
        self._data = None
        self._filter_collection: Optional[FilterCollection] = None
        self._layout = None
        self._field_definitions: Optional[List[FieldDefinition]] = None

    # ----- subclass hooks -----------------------------------------------------
    def get_name(self) -> str:
        """Human readable name shown in the preferences form."""
        return str(self.verbose_name or type(self).__name__)

    @abstractmethod
    def get_query_template(self) -> str:
        """SQL containing ``%%SELECT%%`` and ``%%WHERE%%`` placeholders."""

    @abstractmethod
    def build_available_field_definitions(self) -> List[FieldDefinition]:
        """Every field this data source can show, in declaration order."""

    def build_filter_collection(self) -> FilterCollection:
        return FilterCollection()

    def get_default_sorting(self):
        """(field name, "ASC"|"DESC") pairs applied to the query."""
        return []

    # ----- lazily built collaborators -----------------------------------------
    def get_context(self):
        return self._context

    def get_data_grid(self) -> DataGrid:
        """Get data grid. Build if necessary."""
        if self._data_grid is None:
            data_grid = DataGrid(self.get_context(), record_source=self._record_source)
            data_grid.set_query_template(self.get_query_template())
            data_grid.set_field_definitions(self.get_available_field_definitions())
            data_grid.set_supports_pagination(self.get_layout().supports_pagination())
            for name, direction in self.get_default_sorting():
                data_grid.add_sorting(name, direction)
            data_grid.init()
            self._data_grid = data_grid
        return self._data_grid

    def get_filter_collection(self) -> FilterCollection:
        """Get filter collection for data grid. Build if necessary."""
        if self._filter_collection is None:
            collection = self.build_filter_collection()
            get_filter_values = getattr(self.get_context(), "get_filter_values", None)
            if get_filter_values is not None:
                collection.apply_values(get_filter_values())
            self._filter_collection = collection
        return self._filter_collection

    def get_layout(self):
        if self._layout is None:
            identifier = self.get_preferences("layout") or settings.DASH_DEFAULT_LAYOUT
            self._layout = layout_registry.get(identifier)(self)
        return self._layout

    def get_available_field_definitions(self) -> List[FieldDefinition]:
        """Field definitions ordered by the ``available_fields`` preference.

        Fields named in the preference come first in that order; the rest
        follow in declaration order.
        """
        if self._field_definitions is None:
            definitions = list(self.build_available_field_definitions())
            ordering = {name: index for index, name in enumerate(self.get_preference_mapping("available_fields"))}
            position = {id(d): i for i, d in enumerate(definitions)}
            definitions.sort(
                key=lambda d: (
                    0 if d.get_name() in ordering else 1,
                    ordering.get(d.get_name(), position[id(d)]),
                )
            )
            self._field_definitions = definitions
        return self._field_definitions

    # ----- pipeline -----------------------------------------------------------
    def before_data(self) -> None:
        """Apply preferences to fields and filters before the query runs."""
        for name, preference in self.get_preference_mapping("available_fields").items():
            if not isinstance(preference, Mapping) or "visible" not in preference:
                continue
            definition = self.get_data_grid().get_field_definition(name)
            if definition is None:
                log.debug("Ignoring visibility preference for unknown field %s", name)
                continue
            definition.set_visibility(preference["visible"])

        for name, preference in self.get_preference_mapping("filters").items():
            if not isinstance(preference, Mapping) or "enabled" not in preference:
                continue
            if preference["enabled"] in (False, 0, "0", ""):
                self.get_filter_collection().remove_filter(name)

        self.get_layout().before_data()

    def get_data(self):
        if self._data is None:
            self.before_data()
            data_grid = self.get_data_grid()
            data_grid.set_filter_collection(self.get_filter_collection())
            self._data = data_grid.get_data()
            self.after_data()
        return self._data

    def after_data(self) -> None:
        self.get_layout().after_data()

    def export_for_template(self, request=None) -> Dict[str, Any]:
        return self.get_layout().export_for_template(request)

    def build_preferences_form(self, form: forms.Form) -> None:
        """Add data source and layout fields to the block preferences form."""
        form.fields["data_source_name"] = forms.CharField(
            label=_("Data source"),
            required=False,
            disabled=True,
            initial=self.get_name(),
        )
        form.fields["layout"] = forms.ChoiceField(
            label=_("Layout"),
            choices=layout_registry.choices(),
            initial=self.get_layout().identifier,
        )
        self.get_layout().build_preferences_form(form)

    # ----- preferences --------------------------------------------------------
    def get_preferences(self, name: str):
        """Get a specific preference, or an empty mapping when unset."""
        value = self._preferences.get(name)
        return value if value not in (None, "") else {}

    def get_preference_mapping(self, name: str) -> Mapping[str, Any]:
        value = self.get_preferences(name)
        return value if isinstance(value, Mapping) else {}

    def get_all_preferences(self) -> Dict[str, Any]:
        return self._preferences

    def set_preferences(self, preferences: Optional[Mapping[str, Any]]) -> None:
        self._preferences = dict(preferences or {})
        self._reset()
