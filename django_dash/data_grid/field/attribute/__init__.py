from .base import EMPTY_VALUE, FieldAttribute
from .bool_attribute import BoolAttribute
from .date_attribute import DateAttribute
from .identifier_attribute import IdentifierAttribute
from .image_attribute import ImageAttribute
from .link_attribute import LinkAttribute
from .percent_attribute import PercentAttribute

__all__ = [
    "EMPTY_VALUE",
    "FieldAttribute",
    "BoolAttribute",
    "DateAttribute",
    "IdentifierAttribute",
    "ImageAttribute",
    "LinkAttribute",
    "PercentAttribute",
]
