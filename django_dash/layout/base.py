"""Rendering strategies consuming a data source's data collection."""
from __future__ import annotations

from abc import ABC
from typing import Any, Dict

from django import forms
from django.utils.translation import gettext_lazy as _


class BaseLayout(ABC):
    """Base class for layouts.

    A layout holds a back-reference to the data source it renders. Subclasses
    decide how a data collection maps onto template context and may add their
    own fields to the block preferences form.
    """

    identifier = ""
    verbose_name = ""
    template_name = ""

    def __init__(self, data_source):
        self.data_source = data_source

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"

    def get_data_source(self):
        return self.data_source

    def get_template_name(self) -> str:
        return self.template_name

    def supports_pagination(self) -> bool:
        return False

    def supports_field_visibility(self) -> bool:
        return True

    def supports_filtering(self) -> bool:
        return True

    # ----- lifecycle hooks ----------------------------------------------------
    def before_data(self) -> None:
        """Called after preferences are applied and before the query runs."""

    def after_data(self) -> None:
        """Called once the data collection has been fetched."""

    # ----- preferences --------------------------------------------------------
    def build_preferences_form(self, form: forms.Form) -> None:
        """Add field visibility/order and filter toggles to ``form``."""
        data_source = self.data_source
        if self.supports_field_visibility():
            available = data_source.get_preference_mapping("available_fields")
            for position, definition in enumerate(data_source.get_available_field_definitions()):
                name = definition.get_name()
                saved = available.get(name) or {}
                form.fields[f"available_fields__{name}__visible"] = forms.BooleanField(
                    label=definition.get_title(),
                    required=False,
                    initial=bool(saved.get("visible", definition.is_visible())),
                )
                form.fields[f"available_fields__{name}__sortorder"] = forms.IntegerField(
                    label=_("Order"),
                    required=False,
                    initial=saved.get("sortorder", position),
                    widget=forms.NumberInput(attrs={"class": "form-control form-control-sm"}),
                )
        if self.supports_filtering():
            saved_filters = data_source.get_preference_mapping("filters")
            for filter in data_source.build_filter_collection().get_filters():
                name = filter.get_name()
                saved = saved_filters.get(name) or {}
                form.fields[f"filters__{name}__enabled"] = forms.BooleanField(
                    label=filter.get_label(),
                    required=False,
                    initial=bool(saved.get("enabled", True)),
                )

    # ----- rendering ----------------------------------------------------------
    def get_columns(self):
        return [
            {"name": d.get_name(), "title": d.get_title()}
            for d in self.data_source.get_data_grid().get_field_definitions()
            if d.is_visible()
        ]

    def export_for_template(self, request=None) -> Dict[str, Any]:
        from django_dash.forms import FilterForm

        data = self.data_source.get_data()
        context: Dict[str, Any] = {
            "layout": self.identifier,
            "template_name": self.get_template_name(),
            "data": data,
            "rows": data.to_list(visible_only=True),
            "columns": self.get_columns(),
            "supports_pagination": self.supports_pagination(),
            "supports_filtering": self.supports_filtering(),
            "filter_form": None,
        }
        filter_collection = self.data_source.get_filter_collection()
        if self.supports_filtering() and filter_collection.get_user_filters():
            context["filter_form"] = FilterForm(
                filter_collection=filter_collection,
                prefix=self.data_source.get_context().namespace + "filters",
            )
        return context
