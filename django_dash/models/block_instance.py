"""Saved dashboard block placements and their preferences."""

from django.db import models


class BlockInstance(models.Model):
    """A dashboard block: the chosen data source plus its saved preferences."""

    title = models.CharField(max_length=255, blank=True)
    data_source = models.CharField(
        max_length=255,
        blank=True,
        help_text="Code of a registered data source.",
    )
    preferences = models.JSONField(
        default=dict,
        blank=True,
        help_text="Layout, field visibility/order and filter toggles.",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("title", "pk")

    def __str__(self) -> str:
        return self.title or f"Dash block {self.pk}"

    def get_preferences(self) -> dict:
        return dict(self.preferences) if isinstance(self.preferences, dict) else {}
