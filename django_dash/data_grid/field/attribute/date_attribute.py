from __future__ import annotations

from datetime import date, datetime, timezone as dt_timezone

from django.utils import timezone
from django.utils.dateformat import format as date_format
from django.utils.dateparse import parse_datetime

from django_dash.data_grid.field.attribute.base import EMPTY_VALUE, FieldAttribute


class DateAttribute(FieldAttribute):
    """Formats unix timestamps, dates and datetimes with a Django date format."""

    DEFAULT_FORMAT = "Y-m-d H:i"

    def __init__(self, format: str = DEFAULT_FORMAT, options=None):
        options = dict(options or {})
        options.setdefault("format", format)
        super().__init__(options)

    @staticmethod
    def _to_datetime(data):
        if isinstance(data, (datetime, date)):
            return data
        if isinstance(data, (int, float)):
            return datetime.fromtimestamp(data, tz=dt_timezone.utc)
        if isinstance(data, str):
            if data.strip().isdigit():
                return datetime.fromtimestamp(int(data), tz=dt_timezone.utc)
            return parse_datetime(data)
        return None

    def transform_data(self, data, record):
        if not data:
            return EMPTY_VALUE
        value = self._to_datetime(data)
        if value is None:
            return EMPTY_VALUE
        if isinstance(value, datetime) and timezone.is_aware(value):
            value = timezone.localtime(value)
        return date_format(value, self.get_option("format"))
