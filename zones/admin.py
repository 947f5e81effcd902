from django.contrib import admin
from .models import Zone


@admin.register(Zone)
class ZoneAdmin(admin.ModelAdmin):
    list_display = ("id", "bairro", "taxa")
    search_fields = ("bairro",)
