from __future__ import annotations

from string import Formatter

from django.utils.html import format_html

from django_dash.data_grid.field.attribute.base import EMPTY_VALUE, FieldAttribute
from django_dash.exceptions import DashConfigurationError


class _RecordValues(dict):
    def __missing__(self, key):
        return ""


class LinkAttribute(FieldAttribute):
    """Wraps the value in a link.

    Options:
      - ``page_url``: target URL; ``{name}`` placeholders are filled from the
        record, ``{value}`` with the field value. Positional, attribute and
        index placeholders are rejected.
      - ``label``: link text (defaults to the value itself).
      - ``new_window``: open the link in a new tab.
    """

    def __init__(self, page_url: str = "", label: str = "", new_window: bool = False, options=None):
        options = dict(options or {})
        options.setdefault("page_url", page_url)
        options.setdefault("label", label)
        options.setdefault("new_window", new_window)
        self.validate_page_url(options["page_url"])
        super().__init__(options)

    @staticmethod
    def validate_page_url(page_url) -> None:
        try:
            fields = [name for _text, name, _spec, _conv in Formatter().parse(page_url or "") if name is not None]
        except ValueError as exc:
            raise DashConfigurationError(f"Invalid link page_url '{page_url}': {exc}") from exc
        for name in fields:
            if not name.isidentifier():
                raise DashConfigurationError(
                    f"Link page_url '{page_url}' may only use named placeholders, got '{{{name}}}'"
                )

    def set_option(self, name, value):
        if name == "page_url":
            self.validate_page_url(value)
        super().set_option(name, value)

    def get_url(self, data, record) -> str:
        page_url = self.get_option("page_url") or ""
        values = _RecordValues(record)
        values["value"] = data
        return page_url.format_map(values)

    def transform_data(self, data, record):
        if not data:
            return EMPTY_VALUE
        label = self.get_option("label") or data
        if self.get_option("new_window"):
            return format_html(
                '<a href="{}" target="_blank" rel="noopener">{}</a>', self.get_url(data, record), label
            )
        return format_html('<a href="{}">{}</a>', self.get_url(data, record), label)
