from django.core.exceptions import ImproperlyConfigured


class DashConfigurationError(ImproperlyConfigured):
    """A data source, grid or layout was set up with invalid definitions."""


class UnknownLayoutError(DashConfigurationError):
    """The ``layout`` preference names a layout that is not registered."""
