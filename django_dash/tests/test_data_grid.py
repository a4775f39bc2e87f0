from django.test import SimpleTestCase

from django_dash.context import DashContext
from django_dash.data_grid import DataGrid
from django_dash.data_grid.data.strategy import GroupedStrategy
from django_dash.data_grid.field import FieldDefinition
from django_dash.data_grid.field.attribute import LinkAttribute
from django_dash.data_grid.filter import Filter, FilterCollection
from django_dash.exceptions import DashConfigurationError

from .helpers import RECORDS, FakeRecordSource


class DataGridTests(SimpleTestCase):
    def setUp(self):
        self.source = FakeRecordSource(RECORDS)
        self.grid = DataGrid(DashContext(), record_source=self.source)
        self.grid.set_query_template("SELECT %%SELECT%% FROM stub s %%WHERE%%")
        self.grid.set_field_definitions(
            [
                FieldDefinition("id", "s.id", "ID"),
                FieldDefinition("name", "s.name", "Name", attributes=[LinkAttribute("/people/{id}/")]),
                FieldDefinition("email", "s.email", "Email"),
            ]
        )

    def test_init_rejects_malformed_query_template(self):
        for template in (None, "", "SELECT * FROM stub", "SELECT %%SELECT%% FROM stub"):
            self.grid.set_query_template(template)
            with self.assertRaises(DashConfigurationError):
                self.grid.init()

    def test_init_rejects_missing_or_duplicate_field_definitions(self):
        self.grid.set_field_definitions([])
        with self.assertRaises(DashConfigurationError):
            self.grid.init()
        self.grid.set_field_definitions([FieldDefinition("id", "s.id"), FieldDefinition("id", "s.other")])
        with self.assertRaises(DashConfigurationError):
            self.grid.init()
        self.grid.set_field_definitions(["id"])
        with self.assertRaises(DashConfigurationError):
            self.grid.init()

    def test_get_field_definition(self):
        self.assertEqual(self.grid.get_field_definition("email").get_title(), "Email")
        self.assertIsNone(self.grid.get_field_definition("missing"))

    def test_query_without_filters(self):
        sql, params = self.grid.get_query()
        self.assertEqual(sql, 'SELECT s.id AS "id", s.name AS "name", s.email AS "email" FROM stub s')
        self.assertEqual(params, [])

    def test_query_with_filters_and_sorting(self):
        collection = FilterCollection()
        collection.add_filter(Filter("name", "s.name"))
        collection.apply_values({"name": "Bob"})
        self.grid.set_filter_collection(collection)
        self.grid.add_sorting("name", "desc")
        sql, params = self.grid.get_query()
        self.assertTrue(sql.endswith('FROM stub s WHERE (s.name = %s) ORDER BY "name" DESC'))
        self.assertEqual(params, ["Bob"])

    def test_sorting_validation(self):
        with self.assertRaises(DashConfigurationError):
            self.grid.add_sorting("missing")
        with self.assertRaises(DashConfigurationError):
            self.grid.add_sorting("name", "sideways")

    def test_get_data_is_memoized(self):
        first = self.grid.get_data()
        second = self.grid.get_data()
        self.assertIs(first, second)
        self.assertEqual(self.source.fetch_calls, 1)
        self.assertEqual(len(first), 3)
        self.assertEqual(first.first().get("name").value, '<a href="/people/1/">Alice</a>')

    def test_hidden_fields_are_still_transformed(self):
        self.grid.get_field_definition("name").set_visibility(0)
        row = self.grid.get_data().first()
        self.assertFalse(row.get("name").visible)
        self.assertEqual(row.get("name").value, '<a href="/people/1/">Alice</a>')
        self.assertEqual(list(row.to_dict(visible_only=True)), ["id", "email"])

    def test_pagination(self):
        self.grid.set_supports_pagination(True)
        self.grid.set_per_page(2)
        self.grid.set_page_number(2)
        data = self.grid.get_data()
        self.assertEqual([row.get("id").value for row in data], [3])
        page = self.grid.get_page()
        self.assertEqual(page.number, 2)
        self.assertEqual(page.paginator.num_pages, 2)
        self.assertEqual(self.source.count_calls, 1)
        self.assertEqual(self.source.fetch_calls, 1)

    def test_invalid_page_number_falls_back(self):
        self.grid.set_supports_pagination(True)
        self.grid.set_per_page("not a number")
        self.grid.set_page_number("abc")
        self.assertEqual(self.grid.get_per_page(), 10)
        self.assertEqual(len(self.grid.get_data()), 3)
        self.assertEqual(self.grid.get_page().number, 1)

    def test_grouped_strategy(self):
        self.source.records.append({"id": 4, "name": "Alice", "email": "alice2@example.com"})
        self.grid.set_strategy(GroupedStrategy("name"))
        data = self.grid.get_data()
        self.assertEqual(len(data), 4)
        groups = data.get_child_collections()
        self.assertEqual(list(groups), ["Alice", "Bob", "Carol"])
        self.assertEqual(len(groups["Alice"]), 2)
