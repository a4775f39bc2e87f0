from .base import BaseDataSource
from .registry import DataSourceRegistry, data_source_registry
from .users import UserTable, UsersDataSource

__all__ = ["BaseDataSource", "DataSourceRegistry", "data_source_registry", "UserTable", "UsersDataSource"]
