from .base import BaseBlock
from .dash_block import DashBlock

__all__ = ["BaseBlock", "DashBlock"]
