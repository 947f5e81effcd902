from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["id", "cliente", "status", "turno", "zona", "forma_pagamento", "data_hora"]
    list_filter = ["status", "turno", "forma_pagamento", "data_hora"]
    search_fields = ["cliente__nome", "cliente__telefone", "endereco"]
    inlines = [OrderItemInline]
