from django_dash.data_grid.data.data_collection import DataCollection
from django_dash.data_grid.data.strategy.base import DataStrategy


class StandardStrategy(DataStrategy):
    """One row per record."""

    def convert_records_to_data_collection(self, records, data_grid):
        collection = DataCollection()
        definitions = data_grid.get_field_definitions()
        for record in records:
            collection.add_row(self.build_row(record, definitions))
        return collection
