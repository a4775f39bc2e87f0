from .base import BaseLayout
from .grid_layout import GridLayout
from .one_stat_layout import OneStatLayout
from .registry import LayoutRegistry, layout_registry

__all__ = ["BaseLayout", "GridLayout", "OneStatLayout", "LayoutRegistry", "layout_registry"]
