"""
Session-backed cart endpoints.

The cart lives in the session as a plain dict (see `cart.cart_to_dict`); the
order is only written to the database on checkout.
"""

import logging

from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.utils import get_item
from customer.serializers import PhoneField
from customer.utils import get_customer
from gestao_pedidos.errors import NotFoundError
from orders.models import Order
from orders.serializers import order_to_dict
from orders.utils import create_order
from zones.models import Zone
from zones.utils import get_zone

from . import cart as carts

logger = logging.getLogger(__name__)

SESSION_KEY = "carrinho"


class CartItemSerializer(serializers.Serializer):
    codigo = serializers.CharField(max_length=20)


class CartDeliverySerializer(serializers.Serializer):
    endereco = serializers.CharField(required=False, allow_blank=True)
    zona_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    turno = serializers.ChoiceField(choices=Order.TURNO_CHOICES, required=False)
    forma_pagamento = serializers.ChoiceField(choices=Order.FORMA_PAGAMENTO_CHOICES, required=False)
    observacao = serializers.CharField(required=False, allow_blank=True)


class CartCustomerSerializer(serializers.Serializer):
    telefone = PhoneField()


def load_cart(request):
    return carts.cart_from_dict(request.session.get(SESSION_KEY))


def save_cart(request, cart):
    request.session[SESSION_KEY] = carts.cart_to_dict(cart)


def clear_cart(request):
    request.session.pop(SESSION_KEY, None)


def cart_response(cart, status_code=status.HTTP_200_OK):
    zona_id = cart.entrega.zona_id
    zone_fees = dict(Zone.objects.filter(id=zona_id).values_list("id", "taxa")) if zona_id else {}
    totals = carts.cart_totals(cart, zone_fees)
    data = {
        "linhas": [
            {
                "codigo": linha.codigo,
                "nome": linha.nome,
                "preco": float(linha.preco),
                "quantidade": linha.quantidade,
                "observacao": linha.observacao,
                "total": float(linha.total),
            }
            for linha in cart.linhas
        ],
        "entrega": cart.entrega._asdict(),
        **{key: float(value) for key, value in totals.items()},
    }
    return Response(data, status=status_code)


class CartView(APIView):
    def get(self, request):
        return cart_response(load_cart(request))

    def delete(self, request):
        clear_cart(request)
        return cart_response(carts.Cart())


class CartItemListView(APIView):
    def post(self, request):
        serializer = CartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = get_item(serializer.validated_data["codigo"])
        cart = carts.add_item(load_cart(request), item)
        save_cart(request, cart)
        return cart_response(cart, status.HTTP_201_CREATED)


class CartItemDetailView(APIView):
    def _line_cart(self, request, codigo):
        cart = load_cart(request)
        if cart.get_line(codigo) is None:
            raise NotFoundError(f"Item {codigo} não está no carrinho")
        return cart

    def patch(self, request, codigo):
        cart = self._line_cart(request, codigo)
        # Quantity is coerced rather than rejected.
        cart = carts.update_item(
            cart,
            codigo,
            quantidade=request.data.get("quantidade"),
            observacao=request.data.get("observacao"),
        )
        save_cart(request, cart)
        return cart_response(cart)

    def delete(self, request, codigo):
        cart = carts.remove_item(load_cart(request), codigo)
        save_cart(request, cart)
        return cart_response(cart)


class CartDeliveryView(APIView):
    def patch(self, request):
        serializer = CartDeliverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        fields = serializer.validated_data
        if fields.get("zona_id"):
            get_zone(fields["zona_id"])
        cart = carts.update_delivery(load_cart(request), **fields)
        save_cart(request, cart)
        return cart_response(cart)


class CartCustomerView(APIView):
    def post(self, request):
        serializer = CartCustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = get_customer(serializer.validated_data["telefone"])
        cart = carts.with_customer_defaults(load_cart(request), customer)
        save_cart(request, cart)
        return cart_response(cart)


class CartCheckoutView(APIView):
    def post(self, request):
        cart = load_cart(request)
        entrega = cart.entrega
        order = create_order(
            telefone_cliente=entrega.telefone,
            endereco=entrega.endereco,
            zona_id=entrega.zona_id,
            turno=entrega.turno,
            itens=carts.cart_to_order_lines(cart),
            forma_pagamento=entrega.forma_pagamento,
            observacao=entrega.observacao,
        )
        clear_cart(request)
        logger.info("Cart checked out as order %s", order.id)
        return Response(order_to_dict(order), status=status.HTTP_201_CREATED)
