from rest_framework import serializers


class ConfigVariableCreateSerializer(serializers.Serializer):
    nome = serializers.CharField(max_length=100)
    valor = serializers.CharField(allow_blank=True)


class ConfigVariableUpdateSerializer(serializers.Serializer):
    valor = serializers.CharField(allow_blank=True)


class SecretCheckSerializer(serializers.Serializer):
    tipo = serializers.CharField()
    senha = serializers.CharField(allow_blank=True, trim_whitespace=False)


def config_variable_to_dict(variable):
    return {"nome": variable.nome, "valor": variable.valor}
