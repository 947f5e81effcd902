from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import (
    ConfigVariableCreateSerializer,
    ConfigVariableUpdateSerializer,
    SecretCheckSerializer,
    config_variable_to_dict,
)
from .utils import check_secret, create_variable, delete_variable, get_variable, list_variables, update_variable


class ConfigVariableListView(APIView):
    def get(self, request):
        return Response([config_variable_to_dict(variable) for variable in list_variables()])

    def post(self, request):
        serializer = ConfigVariableCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        variable = create_variable(**serializer.validated_data)
        return Response(config_variable_to_dict(variable), status=status.HTTP_201_CREATED)


class ConfigVariableDetailView(APIView):
    def get(self, request, nome):
        return Response(config_variable_to_dict(get_variable(nome)))

    def patch(self, request, nome):
        serializer = ConfigVariableUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        variable = update_variable(nome, **serializer.validated_data)
        return Response(config_variable_to_dict(variable))

    def delete(self, request, nome):
        return Response(delete_variable(nome))


class SecretCheckView(APIView):
    def post(self, request):
        serializer = SecretCheckSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(check_secret(**serializer.validated_data))
