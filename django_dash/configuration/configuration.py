"""Decides whether a block instance is ready to show data."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from django_dash.data_source.registry import data_source_registry

log = logging.getLogger(__name__)


class BaseConfiguration(ABC):
    def __init__(self, context, template=None):
        self._context = context
        self._template = template

    def get_context(self):
        return self._context

    def get_template(self):
        """The data source rendering this block, or ``None``."""
        return self._template

    @abstractmethod
    def is_fully_configured(self) -> bool:
        """Check if block is ready to display content."""

    @classmethod
    @abstractmethod
    def create_from_instance(cls, block_instance, context):
        """Create a configuration for a saved block instance."""


class Configuration(BaseConfiguration):
    """Configuration backed by a :class:`~django_dash.models.BlockInstance`."""

    def is_fully_configured(self) -> bool:
        return self.get_template() is not None

    @classmethod
    def create_from_instance(cls, block_instance, context, registry=None):
        registry = registry or data_source_registry
        code = (block_instance.data_source or "").strip()
        template = registry.create(code, context) if code else None
        if code and template is None:
            log.warning("Block instance %s uses unknown data source '%s'", block_instance.pk, code)
        if template is not None:
            template.set_preferences(block_instance.get_preferences())
        return cls(context, template)
