from django.utils.html import format_html

from django_dash.data_grid.field.attribute.base import EMPTY_VALUE, FieldAttribute


class ImageAttribute(FieldAttribute):
    """Renders an image URL as an ``<img>`` tag."""

    def transform_data(self, data, record):
        if not data:
            return EMPTY_VALUE
        alt = self.field_definition.get_title() if self.field_definition else ""
        return format_html('<img src="{}" alt="{}" class="img-fluid">', data, alt)
