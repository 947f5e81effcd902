from rest_framework import serializers

from catalog.serializers import item_to_dict
from customer.serializers import PhoneField, customer_to_dict
from zones.serializers import zone_to_dict

from .models import Order

ORDEM_CHOICES = ["mais_recentes", "mais_antigos"]


class OrderLineSerializer(serializers.Serializer):
    codigo = serializers.CharField(max_length=20)
    quantidade = serializers.IntegerField(min_value=1)
    observacao = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class OrderCreateSerializer(serializers.Serializer):
    telefone_cliente = PhoneField()
    endereco = serializers.CharField()
    zona_id = serializers.IntegerField(min_value=1)
    turno = serializers.ChoiceField(choices=Order.TURNO_CHOICES)
    forma_pagamento = serializers.ChoiceField(choices=Order.FORMA_PAGAMENTO_CHOICES, default="dinheiro")
    observacao = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES, default=Order.STATUS_PENDENTE)
    data_hora = serializers.DateTimeField(required=False)
    itens = OrderLineSerializer(many=True, allow_empty=False)


class OrderUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES, required=False)
    data_hora = serializers.DateTimeField(required=False)
    zona_id = serializers.IntegerField(min_value=1, required=False)
    observacao = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    turno = serializers.ChoiceField(choices=Order.TURNO_CHOICES, required=False)
    forma_pagamento = serializers.ChoiceField(choices=Order.FORMA_PAGAMENTO_CHOICES, required=False)
    endereco = serializers.CharField(required=False)
    itens = OrderLineSerializer(many=True, allow_empty=False, required=False)


class OrderFilterSerializer(serializers.Serializer):
    cliente = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES, required=False)
    turno = serializers.ChoiceField(choices=Order.TURNO_CHOICES, required=False)
    mes = serializers.DateField(required=False, input_formats=["%Y-%m", "%Y-%m-%d"])
    ordem = serializers.ChoiceField(choices=ORDEM_CHOICES, default="mais_recentes")


class OrderItemUpdateSerializer(serializers.Serializer):
    quantidade = serializers.IntegerField(min_value=1, required=False)
    observacao = serializers.CharField(required=False, allow_blank=True, allow_null=True)


def order_item_to_dict(linha):
    return {
        "pedido_id": linha.pedido_id,
        "codigo": linha.item_id,
        "quantidade": linha.quantidade,
        "observacao": linha.observacao,
        "item": item_to_dict(linha.item),
        "total": float(linha.total),
    }


def order_to_dict(order):
    itens = list(order.itens.all())
    return {
        "id": order.id,
        "status": order.status,
        "telefone_cliente": order.cliente_id,
        "cliente": customer_to_dict(order.cliente),
        "data_hora": order.data_hora.isoformat() if order.data_hora else None,
        "zona_id": order.zona_id,
        "zona": zone_to_dict(order.zona),
        "observacao": order.observacao,
        "turno": order.turno,
        "forma_pagamento": order.forma_pagamento,
        "endereco": order.endereco,
        "itens": [order_item_to_dict(linha) for linha in itens],
        "subtotal": float(order.subtotal),
        "taxa_entrega": float(order.taxa_entrega),
        "total": float(order.total),
    }
