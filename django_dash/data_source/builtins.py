from django_dash.data_source.users import UsersDataSource


def register(registry):
    registry.register("users", UsersDataSource)
