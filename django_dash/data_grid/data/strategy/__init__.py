from .base import DataStrategy
from .grouped_strategy import GroupedStrategy
from .standard_strategy import StandardStrategy

__all__ = ["DataStrategy", "GroupedStrategy", "StandardStrategy"]
