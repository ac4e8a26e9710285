from django.contrib import admin

from culinary.models import CulinaryEvent


@admin.register(CulinaryEvent)
class CulinaryEventAdmin(admin.ModelAdmin):
    list_display = [
        "title",
        "category",
        "country",
        "date",
        "price",
        "current_participants",
        "max_participants",
    ]
    list_filter = ["category", "country"]
    search_fields = ["title", "cuisine", "chef"]
    ordering = ["position"]
