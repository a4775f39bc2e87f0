from django import forms
from django.utils.translation import gettext_lazy as _
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Column, Field, Fieldset, Layout, Row, Submit

from django_dash.conf import settings
from django_dash.data_source.registry import data_source_registry
from django_dash.models import BlockInstance

SECTIONS = ("available_fields", "filters")


class BlockInstanceForm(forms.ModelForm):
    class Meta:
        model = BlockInstance
        fields = ["title", "data_source"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["title"].widget.attrs.update({"class": "form-control"})
        self.fields["data_source"] = forms.ChoiceField(
            label=_("Data source"),
            choices=[("", "-- Select a data source --")] + data_source_registry.choices(),
            required=False,
            widget=forms.Select(attrs={"class": "form-select"}),
        )
        self.helper = FormHelper()
        self.helper.layout = Layout(
            Row(
                Column(Field("title"), css_class="col-md-6"),
                Column(Field("data_source"), css_class="col-md-6"),
            ),
            Submit("save", _("Save changes"), css_class="btn btn-success"),
        )


class PreferencesForm(forms.Form):
    """Block preferences; fields are contributed by the data source and its layout.

    Section fields are named ``<section>__<name>__<key>`` and folded back into
    the nested preferences mapping by :meth:`get_preferences`.
    """

    def __init__(self, *args, data_source, **kwargs):
        self.data_source = data_source
        super().__init__(*args, **kwargs)
        data_source.build_preferences_form(self)

        general, field_rows, filter_rows = [], [], []
        for name in self.fields:
            parts = name.split("__")
            if len(parts) != 3 or parts[0] not in SECTIONS:
                general.append(Field(name))
            elif parts[0] == "filters":
                filter_rows.append(Field(name))
            elif parts[2] == "visible":
                field_rows.append(
                    Row(
                        Column(Field(name), css_class="col-md-8"),
                        Column(Field(f"available_fields__{parts[1]}__sortorder"), css_class="col-md-4"),
                    )
                )

        sections = [Fieldset(_("General"), *general)]
        if field_rows:
            sections.append(Fieldset(_("Fields"), *field_rows))
        if filter_rows:
            sections.append(Fieldset(_("Filters"), *filter_rows))
        self.helper = FormHelper()
        self.helper.form_tag = False  # outer form tag is in template
        self.helper.layout = Layout(*sections, Submit("save", _("Save preferences"), css_class="btn btn-success"))

    def get_preferences(self):
        """Return the saved preferences updated with the cleaned form values."""
        if not self.is_valid():  # pragma: no cover - guard against misuse
            raise ValueError("Cannot read preferences from an invalid PreferencesForm")
        preferences = dict(self.data_source.get_all_preferences())
        sections = {section: {} for section in SECTIONS}
        for key, value in self.cleaned_data.items():
            parts = key.split("__")
            if len(parts) == 3 and parts[0] in SECTIONS:
                section, name, attr = parts
                sections[section].setdefault(name, {})[attr] = value
            elif key == "data_source_name":
                continue
            elif value in (None, ""):
                preferences.pop(key, None)
            else:
                preferences[key] = value

        preferences["layout"] = self.cleaned_data.get("layout") or settings.DASH_DEFAULT_LAYOUT
        if sections["available_fields"]:
            ordered = sorted(
                enumerate(sections["available_fields"].items()),
                key=lambda item: (
                    item[1][1].get("sortorder") is None,
                    item[1][1].get("sortorder") or 0,
                    item[0],
                ),
            )
            preferences["available_fields"] = {
                name: {"visible": bool(values.get("visible"))} for _index, (name, values) in ordered
            }
        if sections["filters"]:
            preferences["filters"] = {
                name: {"enabled": bool(values.get("enabled"))} for name, values in sections["filters"].items()
            }
        return preferences


class FilterForm(forms.Form):
    """End-user filter controls for the filters a block exposes."""

    def __init__(self, *args, filter_collection, **kwargs):
        super().__init__(*args, **kwargs)
        for filter in filter_collection.get_user_filters():
            self.fields[filter.get_name()] = filter.form_field()
            raw = filter.get_raw_value()
            self.initial[filter.get_name()] = raw.get("after") if isinstance(raw, dict) else raw
        self.helper = FormHelper()
        self.helper.form_method = "get"
        self.helper.layout = Layout(
            Row(*[Column(Field(name), css_class="col-md-3") for name in self.fields]),
            Submit("apply", _("Apply"), css_class="btn btn-primary btn-sm"),
        )

    def add_prefix(self, field_name):
        return f"{self.prefix}.{field_name}" if self.prefix else field_name
