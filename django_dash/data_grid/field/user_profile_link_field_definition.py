from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from django_dash.conf import settings
from django_dash.data_grid.field.field_definition import FieldDefinition


class UserProfileLinkFieldDefinition(FieldDefinition):
    """Renders a user id as a link to that user's profile page."""

    def transform_data(self, data: Any, record: Mapping[str, Any]) -> Any:
        if data:
            url = f"{settings.DASH_USER_PROFILE_URL}?{urlencode({'id': data})}"
            return format_html('<a href="{}">{}</a>', url, _("View profile"))
        return ""
