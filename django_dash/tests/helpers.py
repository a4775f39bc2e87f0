from django_dash.data_grid.field import FieldDefinition
from django_dash.data_grid.filter import Condition, Filter, FilterCollection
from django_dash.data_grid.record_source import RecordSource
from django_dash.data_source.base import BaseDataSource


class FakeRecordSource(RecordSource):
    """In-memory record source counting how often it is queried."""

    def __init__(self, records=()):
        self.records = [dict(r) for r in records]
        self.fetch_calls = 0
        self.count_calls = 0
        self.queries = []
        self.limits = []

    def fetch(self, sql, params, limit=None, offset=0):
        self.fetch_calls += 1
        self.queries.append((sql, list(params)))
        self.limits.append(limit)
        rows = self.records[offset:]
        if limit is not None:
            rows = rows[:limit]
        return [dict(r) for r in rows]

    def count(self, sql, params):
        self.count_calls += 1
        return len(self.records)


class StubDataSource(BaseDataSource):
    verbose_name = "Stub"

    def get_query_template(self):
        return "SELECT %%SELECT%% FROM stub s %%WHERE%%"

    def build_available_field_definitions(self):
        return [
            FieldDefinition("id", "s.id", "ID"),
            FieldDefinition("name", "s.name", "Name"),
            FieldDefinition("email", "s.email", "Email"),
        ]

    def build_filter_collection(self):
        collection = FilterCollection("stub")
        collection.add_filter(Condition("activeonly", "s.active", value=1))
        collection.add_filter(Filter("name", "s.name", "Name", operation=Filter.OPERATION_LIKE))
        return collection


RECORDS = [
    {"id": 1, "name": "Alice", "email": "alice@example.com"},
    {"id": 2, "name": "Bob", "email": "bob@example.com"},
    {"id": 3, "name": "Carol", "email": "carol@example.com"},
]
