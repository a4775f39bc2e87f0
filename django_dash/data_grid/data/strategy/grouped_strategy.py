from django_dash.data_grid.data.data_collection import DataCollection
from django_dash.data_grid.data.strategy.base import DataStrategy


class GroupedStrategy(DataStrategy):
    """Rows plus one child collection per distinct raw value of ``group_by``."""

    def __init__(self, group_by: str):
        self.group_by = group_by

    def convert_records_to_data_collection(self, records, data_grid):
        collection = DataCollection()
        definitions = data_grid.get_field_definitions()
        for record in records:
            row = self.build_row(record, definitions)
            collection.add_row(row)
            key = str(record.get(self.group_by, ""))
            group = collection.get_child_collection(key)
            if group is None:
                group = DataCollection()
                collection.add_child_collection(key, group)
            group.add_row(row)
        return collection
