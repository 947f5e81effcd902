from rest_framework import serializers

from gestao_pedidos.errors import ValidationError
from zones.serializers import zone_to_dict

from .validators import format_cpf, format_phone, normalize_cpf, normalize_phone


class PhoneField(serializers.CharField):
    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        try:
            return normalize_phone(value)
        except ValidationError as e:
            raise serializers.ValidationError(e.message)


class CustomerCreateSerializer(serializers.Serializer):
    telefone = PhoneField()
    nome = serializers.CharField(max_length=150, min_length=3)
    cpf = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    endereco = serializers.CharField(min_length=5)
    zona_id = serializers.IntegerField(min_value=1)

    def validate_cpf(self, value):
        try:
            return normalize_cpf(value)
        except ValidationError as e:
            raise serializers.ValidationError(e.message)


class CustomerUpdateSerializer(serializers.Serializer):
    nome = serializers.CharField(max_length=150, min_length=3, required=False)
    cpf = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    endereco = serializers.CharField(min_length=5, required=False)
    zona_id = serializers.IntegerField(min_value=1, required=False)

    def validate_cpf(self, value):
        try:
            return normalize_cpf(value)
        except ValidationError as e:
            raise serializers.ValidationError(e.message)


def customer_to_dict(customer):
    return {
        "telefone": customer.telefone,
        "telefone_formatado": format_phone(customer.telefone),
        "nome": customer.nome,
        "cpf": format_cpf(customer.cpf) if customer.cpf else None,
        "endereco": customer.endereco,
        "zona_id": customer.zona_id,
        "zona": zone_to_dict(customer.zona),
        "created_at": customer.created_at.isoformat() if customer.created_at else None,
        "updated_at": customer.updated_at.isoformat() if customer.updated_at else None,
    }
