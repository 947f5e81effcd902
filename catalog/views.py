from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import ItemCreateSerializer, ItemUpdateSerializer, item_to_dict
from .utils import create_item, delete_item, get_item, list_items, update_item


class ItemListView(APIView):
    """Cardápio completo e cadastro de itens"""

    def get(self, request):
        # Same search the order screen does: by name or code
        items = list_items(q=request.query_params.get("q", "").strip())
        return Response([item_to_dict(item) for item in items])

    def post(self, request):
        serializer = ItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = create_item(**serializer.validated_data)
        return Response(item_to_dict(item), status=status.HTTP_201_CREATED)


class ItemDetailView(APIView):
    def get(self, request, codigo):
        return Response(item_to_dict(get_item(codigo)))

    def patch(self, request, codigo):
        serializer = ItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = update_item(codigo, **serializer.validated_data)
        return Response(item_to_dict(item))

    def delete(self, request, codigo):
        return Response(delete_item(codigo))
