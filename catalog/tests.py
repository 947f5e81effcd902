from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from customer.models import Customer
from gestao_pedidos.errors import ConflictError, NotFoundError
from orders.models import Order, OrderItem
from zones.models import Zone

from .models import Item
from .utils import create_item, delete_item, get_item, list_items, update_item


class ItemUtilsTest(TestCase):
    def setUp(self):
        self.item = create_item(codigo="X1", nome="Pastel", preco=Decimal("10.00"))

    def test_get_by_code(self):
        self.assertEqual(get_item("X1").nome, "Pastel")

    def test_get_missing_item(self):
        with self.assertRaises(NotFoundError) as ctx:
            get_item("NOPE")
        self.assertEqual(ctx.exception.message, "Item NOPE não encontrado")

    def test_duplicate_code(self):
        with self.assertRaises(ConflictError):
            create_item(codigo="X1", nome="Outro", preco=Decimal("1.00"))
        self.assertEqual(Item.objects.count(), 1)

    def test_list_is_ordered_by_code(self):
        create_item(codigo="A1", nome="Água", preco=Decimal("3.00"))
        self.assertEqual([item.codigo for item in list_items()], ["A1", "X1"])

    def test_search_by_name_or_code(self):
        create_item(codigo="B1", nome="Suco de laranja", preco=Decimal("7.00"))
        self.assertEqual([item.codigo for item in list_items(q="SUCO")], ["B1"])
        self.assertEqual([item.codigo for item in list_items(q="x1")], ["X1"])
        self.assertEqual(list_items(q="pizza"), [])

    def test_partial_update(self):
        update_item("X1", preco=Decimal("12.50"))
        item = Item.objects.get(pk="X1")
        self.assertEqual(item.preco, Decimal("12.50"))
        self.assertEqual(item.nome, "Pastel")

    def test_delete_then_not_found(self):
        self.assertEqual(delete_item("X1"), {"codigo": "X1", "nome": "Pastel", "preco": 10.0})
        with self.assertRaises(NotFoundError):
            get_item("X1")

    def test_delete_item_used_by_an_order(self):
        zona = Zone.objects.create(bairro="Centro", taxa=Decimal("5.00"))
        cliente = Customer.objects.create(telefone="987654321", nome="Ana", endereco="Rua A, 1", zona=zona)
        pedido = Order.objects.create(
            cliente=cliente, zona=zona, turno="almoco", forma_pagamento="dinheiro", endereco="Rua A, 1"
        )
        OrderItem.objects.create(pedido=pedido, item=self.item, quantidade=1)
        with self.assertRaises(ConflictError):
            delete_item("X1")


class ItemApiTest(TestCase):
    def setUp(self):
        Item.objects.create(codigo="X1", nome="Pastel de carne", preco=Decimal("10.00"))
        Item.objects.create(codigo="B1", nome="Suco natural", preco=Decimal("7.00"))

    def test_list(self):
        response = self.client.get(reverse("catalog:item_list"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["codigo"] for item in response.json()], ["B1", "X1"])

    def test_search_by_name_or_code(self):
        response = self.client.get(reverse("catalog:item_list"), {"q": "pastel"})
        self.assertEqual([item["codigo"] for item in response.json()], ["X1"])
        response = self.client.get(reverse("catalog:item_list"), {"q": "b1"})
        self.assertEqual([item["codigo"] for item in response.json()], ["B1"])

    def test_create(self):
        response = self.client.post(
            reverse("catalog:item_list"),
            {"codigo": "D1", "nome": "Pudim", "preco": "6.00"},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"codigo": "D1", "nome": "Pudim", "preco": 6.0})

    def test_create_with_zero_price(self):
        response = self.client.post(
            reverse("catalog:item_list"),
            {"codigo": "D1", "nome": "Pudim", "preco": "0.00"},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Item.objects.filter(pk="D1").exists())

    def test_create_duplicate(self):
        response = self.client.post(
            reverse("catalog:item_list"),
            {"codigo": "X1", "nome": "Outro", "preco": "1.00"},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"], "conflict")

    def test_patch_and_delete(self):
        url = reverse("catalog:item_detail", kwargs={"codigo": "X1"})
        response = self.client.patch(url, {"nome": "Pastel de queijo"}, content_type="application/json")
        self.assertEqual(response.json()["nome"], "Pastel de queijo")
        self.assertEqual(self.client.delete(url).status_code, 200)
        self.assertEqual(self.client.get(url).status_code, 404)
