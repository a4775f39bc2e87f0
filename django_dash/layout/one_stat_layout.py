from django import forms
from django.utils.translation import gettext_lazy as _

from django_dash.data_grid.field.field_definition import FieldDefinition
from django_dash.layout.base import BaseLayout


class OneStatLayout(BaseLayout):
    """Shows a single value: the ``stat_field`` of the first row."""

    identifier = "one_stat"
    verbose_name = _("One stat")
    template_name = "dash/layout/one_stat.html"

    def supports_field_visibility(self):
        return False

    def before_data(self):
        self.data_source.get_data_grid().set_limit(1)

    def get_stat_field_name(self):
        name = self.data_source.get_preferences("stat_field")
        if name:
            return name
        definitions = self.data_source.get_available_field_definitions()
        return definitions[0].get_name() if definitions else None

    def build_preferences_form(self, form):
        form.fields["stat_field"] = forms.ChoiceField(
            label=_("Statistic field"),
            choices=[
                (d.get_name(), d.get_title()) for d in self.data_source.get_available_field_definitions()
            ],
            required=False,
            initial=self.get_stat_field_name(),
        )
        super().build_preferences_form(form)

    def export_for_template(self, request=None):
        context = super().export_for_template(request)
        name = self.get_stat_field_name()
        row = context["data"].first()
        field = row.get(name) if row is not None and name else None
        definition = self.data_source.get_data_grid().get_field_definition(name) if name else None
        context["stat_label"] = definition.get_title() if definition else ""
        context["stat_value"] = field.value if field is not None else FieldDefinition.DEFAULT_EMPTY_VALUE
        return context
