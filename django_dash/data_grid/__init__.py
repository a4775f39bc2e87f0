from .data_grid import DataGrid
from .record_source import RecordSet, RecordSource, SqlRecordSource

__all__ = ["DataGrid", "RecordSet", "RecordSource", "SqlRecordSource"]
