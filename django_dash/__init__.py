"""Django Dash reusable application."""

from .apps import DjangoDashConfig
from .conf import settings

__all__ = ["settings", "DjangoDashConfig"]
