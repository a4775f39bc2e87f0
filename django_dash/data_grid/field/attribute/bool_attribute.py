from django.utils.translation import gettext_lazy as _

from django_dash.data_grid.field.attribute.base import FieldAttribute


class BoolAttribute(FieldAttribute):
    """Renders truthy values as "Yes" and everything else as "No"."""

    def transform_data(self, data, record):
        if isinstance(data, str):
            data = data.strip().lower() not in {"", "0", "false", "no"}
        return _("Yes") if data else _("No")
