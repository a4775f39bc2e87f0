from importlib import import_module

from django.apps import AppConfig

from django_dash.conf import settings


class DjangoDashConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "django_dash"
    verbose_name = "Django Dash"

    def ready(self):
        from .data_source.builtins import register as register_builtins
        from .data_source.registry import data_source_registry

        register_builtins(data_source_registry)

        for entry in getattr(settings, "DASH_DATA_SOURCES", []):
            try:
                module_path, callable_name = entry.split(":", 1)
            except ValueError:
                import_module(entry)
            else:
                module = import_module(module_path)
                registrar = getattr(module, callable_name)
                registrar(data_source_registry)
