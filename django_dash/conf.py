"""Runtime access to Django Dash configuration defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings as django_settings

__all__ = ["settings", "DjangoDashSettings"]


@dataclass
class DjangoDashSettings:
    """Proxy object exposing Django settings with sensible fallbacks."""

    defaults: dict[str, Any]

    def __getattr__(self, attr: str) -> Any:  # pragma: no cover - simple delegation
        if attr in self.defaults:
            return getattr(django_settings, attr, self.defaults[attr])
        return getattr(django_settings, attr)


settings = DjangoDashSettings(
    defaults={
        "DASH_DATA_SOURCES": [],
        "DASH_DEFAULT_LAYOUT": "grid",
        "DASH_PER_PAGE": 10,
        "DASH_USER_PROFILE_URL": "/user/profile/",
        "DASH_DATABASE": "default",
    }
)
