"""Central registry for data source implementations."""

from .base import BaseDataSource


class DataSourceRegistry:
    """Store data source classes by code.

    Block instances persist the code of their data source; the registry
    resolves it back to a class. Alongside each class the registry keeps
    metadata such as its display name and owning app.
    """

    def __init__(self):
        self._data_sources = {}
        self._metadata = {}

    def register(self, code, data_source_class):
        """Register ``data_source_class`` under ``code``.

        Raises ``ValueError`` if ``code`` is already present in the registry
        or ``TypeError`` if the class is not a ``BaseDataSource`` subclass.
        """

        if not (isinstance(data_source_class, type) and issubclass(data_source_class, BaseDataSource)):
            raise TypeError("data_source_class must subclass BaseDataSource")
        if code in self._data_sources:
            raise ValueError(f"Data source '{code}' is already registered")
        self._data_sources[code] = data_source_class

        from django.apps import apps as django_apps
        module = getattr(data_source_class, "__module__", "")
        cfg = None
        for candidate in django_apps.get_app_configs():
            mod_name = getattr(candidate.module, "__name__", "")
            if module.startswith(mod_name):
                cfg = candidate
                break

        self._metadata[code] = {
            "name": str(data_source_class.verbose_name or data_source_class.__name__),
            "class": data_source_class.__name__,
            "app_label": cfg.label if cfg else None,
        }

    def unregister(self, code):
        self._data_sources.pop(code, None)
        self._metadata.pop(code, None)

    def get(self, code):
        """Return the class registered under ``code`` if any."""

        return self._data_sources.get(code)

    def create(self, code, context, **kwargs):
        """Instantiate the data source registered under ``code``, or ``None``."""

        data_source_class = self.get(code)
        if data_source_class is None:
            return None
        return data_source_class(context, **kwargs)

    def metadata(self, code):
        return self._metadata.get(code, {})

    def all(self):
        return dict(self._data_sources)

    def all_metadata(self):
        return dict(self._metadata)

    def choices(self):
        """``(code, name)`` pairs sorted by name, for form select widgets."""

        return sorted(
            ((code, meta["name"]) for code, meta in self._metadata.items()),
            key=lambda choice: choice[1].lower(),
        )


# Global registry instance used throughout the project.
data_source_registry = DataSourceRegistry()


__all__ = ["DataSourceRegistry", "data_source_registry"]
