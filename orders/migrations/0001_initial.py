import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        ("customer", "0001_initial"),
        ("zones", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "status",
                    models.CharField(
                        choices=[("pendente", "Pendente"), ("entregue", "Entregue"), ("cancelado", "Cancelado")],
                        default="pendente",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                (
                    "data_hora",
                    models.DateTimeField(default=django.utils.timezone.now, verbose_name="Data e Hora"),
                ),
                ("observacao", models.TextField(blank=True, null=True, verbose_name="Observação")),
                (
                    "turno",
                    models.CharField(
                        choices=[("almoco", "Almoço"), ("jantar", "Jantar")],
                        max_length=10,
                        verbose_name="Turno",
                    ),
                ),
                (
                    "forma_pagamento",
                    models.CharField(
                        choices=[("dinheiro", "Dinheiro"), ("pix", "Pix"), ("cartao", "Cartão")],
                        max_length=20,
                        verbose_name="Forma de Pagamento",
                    ),
                ),
                ("endereco", models.TextField(verbose_name="Endereço de Entrega")),
                (
                    "cliente",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="pedidos",
                        to="customer.customer",
                        verbose_name="Cliente",
                    ),
                ),
                (
                    "zona",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="pedidos",
                        to="zones.zone",
                        verbose_name="Zona",
                    ),
                ),
            ],
            options={
                "verbose_name": "Pedido",
                "verbose_name_plural": "Pedidos",
                "ordering": ["-data_hora"],
                "indexes": [models.Index(fields=["status", "data_hora"], name="orders_status_data_idx")],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "quantidade",
                    models.PositiveIntegerField(
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                        verbose_name="Quantidade",
                    ),
                ),
                ("observacao", models.TextField(blank=True, null=True, verbose_name="Observação")),
                (
                    "item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="linhas_pedido",
                        to="catalog.item",
                        verbose_name="Item",
                    ),
                ),
                (
                    "pedido",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="itens",
                        to="orders.order",
                        verbose_name="Pedido",
                    ),
                ),
            ],
            options={
                "verbose_name": "Item de Pedido",
                "verbose_name_plural": "Itens de Pedido",
                "unique_together": {("pedido", "item")},
            },
        ),
    ]
