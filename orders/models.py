from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from catalog.models import Item
from customer.models import Customer
from zones.models import Zone


class Order(models.Model):
    """Pedido de entrega"""

    STATUS_PENDENTE = "pendente"
    STATUS_ENTREGUE = "entregue"
    STATUS_CANCELADO = "cancelado"

    STATUS_CHOICES = [
        (STATUS_PENDENTE, "Pendente"),
        (STATUS_ENTREGUE, "Entregue"),
        (STATUS_CANCELADO, "Cancelado"),
    ]

    TURNO_ALMOCO = "almoco"
    TURNO_JANTAR = "jantar"

    TURNO_CHOICES = [
        (TURNO_ALMOCO, "Almoço"),
        (TURNO_JANTAR, "Jantar"),
    ]

    FORMA_PAGAMENTO_CHOICES = [
        ("dinheiro", "Dinheiro"),
        ("pix", "Pix"),
        ("cartao", "Cartão"),
    ]

    status = models.CharField("Status", max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDENTE)
    cliente = models.ForeignKey(
        Customer,
        on_delete=models.PROTECT,
        related_name="pedidos",
        verbose_name="Cliente",
    )
    data_hora = models.DateTimeField("Data e Hora", default=timezone.now)
    zona = models.ForeignKey(Zone, on_delete=models.PROTECT, related_name="pedidos", verbose_name="Zona")
    observacao = models.TextField("Observação", blank=True, null=True)
    turno = models.CharField("Turno", max_length=10, choices=TURNO_CHOICES)
    forma_pagamento = models.CharField("Forma de Pagamento", max_length=20, choices=FORMA_PAGAMENTO_CHOICES)
    endereco = models.TextField("Endereço de Entrega")

    class Meta:
        ordering = ["-data_hora"]
        verbose_name = "Pedido"
        verbose_name_plural = "Pedidos"
        indexes = [
            models.Index(fields=["status", "data_hora"], name="orders_status_data_idx"),
        ]

    def __str__(self):
        return f"Pedido #{self.pk} - {self.get_status_display()}"

    @property
    def subtotal(self):
        """Sum of current catalog price times quantity over all lines"""
        return sum((linha.total for linha in self.itens.all()), Decimal("0.00"))

    @property
    def taxa_entrega(self):
        return self.zona.taxa

    @property
    def total(self):
        return self.subtotal + self.taxa_entrega


class OrderItem(models.Model):
    """Item de um pedido"""

    pedido = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="itens", verbose_name="Pedido")
    item = models.ForeignKey(Item, on_delete=models.PROTECT, related_name="linhas_pedido", verbose_name="Item")
    quantidade = models.PositiveIntegerField("Quantidade", validators=[MinValueValidator(1)], default=1)
    observacao = models.TextField("Observação", blank=True, null=True)

    class Meta:
        verbose_name = "Item de Pedido"
        verbose_name_plural = "Itens de Pedido"
        unique_together = [["pedido", "item"]]

    def __str__(self):
        return f"{self.item.nome} x{self.quantidade}"

    @property
    def total(self):
        return self.item.preco * self.quantidade
