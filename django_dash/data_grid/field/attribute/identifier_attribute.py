from django_dash.data_grid.field.attribute.base import FieldAttribute


class IdentifierAttribute(FieldAttribute):
    """Marks the field as the unique row identifier. Values pass through."""

    def transform_data(self, data, record):
        return data
