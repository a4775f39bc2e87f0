from .filter import Condition, DateFilter, Filter, LoggedInUserCondition, SelectFilter
from .filter_collection import FilterCollection

__all__ = [
    "Condition",
    "DateFilter",
    "Filter",
    "FilterCollection",
    "LoggedInUserCondition",
    "SelectFilter",
]
