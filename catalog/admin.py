from django.contrib import admin
from .models import Item


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = (
        "codigo",
        "nome",
        "preco",
    )
    search_fields = ("codigo", "nome")
