from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.serializers import (
    OrderCreateSerializer,
    OrderFilterSerializer,
    OrderItemUpdateSerializer,
    OrderLineSerializer,
    OrderUpdateSerializer,
    order_item_to_dict,
    order_to_dict,
)
from orders.utils import (
    add_order_item,
    create_order,
    delete_order,
    delete_order_item,
    get_order,
    get_order_item,
    list_order_items,
    list_orders_filtered,
    update_order,
    update_order_item,
)


class OrderListView(APIView):
    """List orders with filters, or submit a new order"""

    def get(self, request):
        filter_serializer = OrderFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        orders = list_orders_filtered(**filter_serializer.validated_data)
        return Response([order_to_dict(order) for order in orders])

    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = create_order(**serializer.validated_data)
        return Response(order_to_dict(order), status=status.HTTP_201_CREATED)


class OrderDetailView(APIView):
    def get(self, request, pedido_id):
        return Response(order_to_dict(get_order(pedido_id)))

    def patch(self, request, pedido_id):
        serializer = OrderUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = update_order(pedido_id, **serializer.validated_data)
        return Response(order_to_dict(order))

    def delete(self, request, pedido_id):
        return Response(delete_order(pedido_id))


class OrderItemListView(APIView):
    """Lines of one order"""

    def get(self, request, pedido_id):
        return Response([order_item_to_dict(linha) for linha in list_order_items(pedido_id)])

    def post(self, request, pedido_id):
        serializer = OrderLineSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        linha = add_order_item(pedido_id, **serializer.validated_data)
        return Response(order_item_to_dict(linha), status=status.HTTP_201_CREATED)


class OrderItemDetailView(APIView):
    def get(self, request, pedido_id, codigo):
        return Response(order_item_to_dict(get_order_item(pedido_id, codigo)))

    def patch(self, request, pedido_id, codigo):
        serializer = OrderItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        linha = update_order_item(pedido_id, codigo, **serializer.validated_data)
        return Response(order_item_to_dict(linha))

    def delete(self, request, pedido_id, codigo):
        return Response(delete_order_item(pedido_id, codigo))
