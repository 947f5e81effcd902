from decimal import Decimal

from rest_framework import serializers


class ZoneCreateSerializer(serializers.Serializer):
    bairro = serializers.CharField(max_length=100)
    taxa = serializers.DecimalField(max_digits=8, decimal_places=2, min_value=Decimal("0"))


class ZoneUpdateSerializer(serializers.Serializer):
    bairro = serializers.CharField(max_length=100, required=False)
    taxa = serializers.DecimalField(max_digits=8, decimal_places=2, min_value=Decimal("0"), required=False)


def zone_to_dict(zone):
    return {
        "id": zone.id,
        "bairro": zone.bairro,
        "taxa": float(zone.taxa),
    }
