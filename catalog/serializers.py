from decimal import Decimal

from rest_framework import serializers

MIN_PRECO = Decimal("0.01")


class ItemCreateSerializer(serializers.Serializer):
    codigo = serializers.CharField(max_length=20)
    nome = serializers.CharField(max_length=200)
    preco = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=MIN_PRECO)


class ItemUpdateSerializer(serializers.Serializer):
    nome = serializers.CharField(max_length=200, required=False)
    preco = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=MIN_PRECO, required=False)


def item_to_dict(item):
    return {
        "codigo": item.codigo,
        "nome": item.nome,
        "preco": float(item.preco) if item.preco is not None else None,
    }
