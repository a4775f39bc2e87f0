from django_dash.data_grid.field.attribute.base import EMPTY_VALUE, FieldAttribute


class PercentAttribute(FieldAttribute):
    """Formats a number as a percentage.

    Set ``fraction`` when values are stored as 0..1 instead of 0..100.
    """

    def __init__(self, precision: int = 0, fraction: bool = False, options=None):
        options = dict(options or {})
        options.setdefault("precision", precision)
        options.setdefault("fraction", fraction)
        super().__init__(options)

    def transform_data(self, data, record):
        if data in (None, ""):
            return EMPTY_VALUE
        try:
            value = float(data)
        except (TypeError, ValueError):
            return EMPTY_VALUE
        if self.get_option("fraction"):
            value *= 100
        return f"{value:.{int(self.get_option('precision'))}f}%"
