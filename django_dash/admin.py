from django.contrib import admin

from .models import BlockInstance


@admin.register(BlockInstance)
class BlockInstanceAdmin(admin.ModelAdmin):
    list_display = ("title", "data_source", "updated_at")
    search_fields = ("title", "data_source")
    list_filter = ("data_source",)
