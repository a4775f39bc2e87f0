from .data_collection import DataCollection
from .field import Field, FieldCollection

__all__ = ["DataCollection", "Field", "FieldCollection"]
