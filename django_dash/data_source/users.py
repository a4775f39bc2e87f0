"""Built-in data source listing the site's users."""
from __future__ import annotations

from django.contrib.auth import get_user_model
from django.utils.translation import gettext_lazy as _

from django_dash.data_grid.field import FieldDefinition, UserProfileLinkFieldDefinition
from django_dash.data_grid.field.attribute import BoolAttribute, DateAttribute, IdentifierAttribute
from django_dash.data_grid.filter import Condition, DateFilter, Filter, FilterCollection, SelectFilter
from django_dash.data_source.base import BaseDataSource
from django_dash.structure import Table


class UserTable(Table):
    """The auth user table under alias ``u``."""

    def get_title(self):
        return _("Users")

    def get_table_name(self):
        return get_user_model()._meta.db_table

    def get_alias(self):
        return "u"

    def get_fields(self):
        return [
            FieldDefinition("id", self.column("id"), _("User ID"), attributes=[IdentifierAttribute()]),
            FieldDefinition("username", self.column("username"), _("Username")),
            FieldDefinition("first_name", self.column("first_name"), _("First name")),
            FieldDefinition("last_name", self.column("last_name"), _("Last name")),
            FieldDefinition("email", self.column("email"), _("Email address")),
            FieldDefinition(
                "date_joined", self.column("date_joined"), _("Date joined"), attributes=[DateAttribute("Y-m-d")]
            ),
            FieldDefinition("is_staff", self.column("is_staff"), _("Staff"), attributes=[BoolAttribute()]),
            UserProfileLinkFieldDefinition("profile_link", self.column("id"), _("Profile")),
        ]


class UsersDataSource(BaseDataSource):
    verbose_name = _("Users")

    table = UserTable()

    def get_query_template(self):
        table = self.table
        return f"SELECT %%SELECT%% FROM {table.get_table_name()} {table.get_alias()} %%WHERE%% %%ORDERBY%%"

    def build_available_field_definitions(self):
        return self.table.get_fields()

    def build_filter_collection(self):
        column = self.table.column
        collection = FilterCollection("users")
        collection.add_filter(Condition("activeonly", column("is_active"), value=True, label=_("Active users only")))
        collection.add_filter(
            SelectFilter("staff", column("is_staff"), _("Staff"), choices=[("1", _("Yes")), ("0", _("No"))])
        )
        collection.add_filter(Filter("username", column("username"), _("Username"), operation=Filter.OPERATION_LIKE))
        collection.add_filter(DateFilter("date_joined", column("date_joined"), _("Joined after")))
        return collection

    def get_default_sorting(self):
        return [("username", "ASC")]
