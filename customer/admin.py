from django.contrib import admin
from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ["telefone", "nome", "zona", "created_at"]
    search_fields = ["telefone", "nome", "cpf", "endereco"]
    list_filter = ["zona", "created_at"]
    readonly_fields = ["created_at", "updated_at"]
