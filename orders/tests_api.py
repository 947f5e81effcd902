from datetime import datetime
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from catalog.models import Item
from customer.models import Customer
from zones.models import Zone

from orders.models import Order, OrderItem


class OrderApiTest(TestCase):
    def setUp(self):
        self.zona = Zone.objects.create(bairro="Centro", taxa=Decimal("5.00"))
        Customer.objects.create(telefone="987654321", nome="Ana Souza", endereco="Rua das Flores, 10", zona=self.zona)
        Item.objects.create(codigo="X1", nome="Marmita", preco=Decimal("10.00"))
        Item.objects.create(codigo="X2", nome="Refrigerante", preco=Decimal("4.50"))

    def _payload(self, **overrides):
        return {
            "telefone_cliente": "98765-4321",
            "endereco": "Rua das Flores, 10",
            "zona_id": self.zona.id,
            "turno": "almoco",
            "forma_pagamento": "pix",
            "itens": [{"codigo": "X1", "quantidade": 2}],
            **overrides,
        }

    def _post(self, **overrides):
        return self.client.post(
            reverse("orders:order_list"), self._payload(**overrides), content_type="application/json"
        )

    def test_create(self):
        response = self._post()
        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["status"], "pendente")
        self.assertEqual(data["telefone_cliente"], "987654321")
        self.assertEqual(data["subtotal"], 20.0)
        self.assertEqual(data["taxa_entrega"], 5.0)
        self.assertEqual(data["total"], 25.0)
        self.assertEqual(data["itens"][0]["item"]["nome"], "Marmita")

    def test_create_without_lines(self):
        response = self._post(itens=[])
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "validation")
        self.assertEqual(Order.objects.count(), 0)

    def test_create_without_shift(self):
        payload = self._payload()
        del payload["turno"]
        response = self.client.post(reverse("orders:order_list"), payload, content_type="application/json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Order.objects.count(), 0)

    def test_create_with_repeated_item(self):
        response = self._post(itens=[{"codigo": "X1", "quantidade": 1}, {"codigo": "X1", "quantidade": 1}])
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Order.objects.count(), 0)

    def test_create_for_unknown_customer(self):
        response = self._post(telefone_cliente="912345678")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "not_found", "message": "Cliente não encontrado"})

    def test_patch_replaces_lines(self):
        pedido_id = self._post().json()["id"]
        response = self.client.patch(
            reverse("orders:order_detail", kwargs={"pedido_id": pedido_id}),
            {"status": "entregue", "itens": [{"codigo": "X2", "quantidade": 2}]},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "entregue")
        self.assertEqual([linha["codigo"] for linha in data["itens"]], ["X2"])
        self.assertEqual(data["total"], 14.0)

    def test_patch_with_empty_lines(self):
        pedido_id = self._post().json()["id"]
        response = self.client.patch(
            reverse("orders:order_detail", kwargs={"pedido_id": pedido_id}),
            {"itens": []},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(OrderItem.objects.filter(pedido_id=pedido_id).count(), 1)

    def test_delete_then_get(self):
        pedido_id = self._post().json()["id"]
        url = reverse("orders:order_detail", kwargs={"pedido_id": pedido_id})
        response = self.client.delete(url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["id"], pedido_id)
        self.assertEqual(self.client.get(url).status_code, 404)

    def test_filters(self):
        self._post(data_hora=timezone.make_aware(datetime(2024, 1, 15, 12, 0)).isoformat())
        self._post(turno="jantar", data_hora=timezone.make_aware(datetime(2024, 2, 10, 19, 0)).isoformat())

        response = self.client.get(reverse("orders:order_list"), {"mes": "2024-02"})
        self.assertEqual([o["turno"] for o in response.json()], ["jantar"])

        response = self.client.get(reverse("orders:order_list"), {"ordem": "mais_antigos"})
        self.assertEqual([o["turno"] for o in response.json()], ["almoco", "jantar"])

        response = self.client.get(reverse("orders:order_list"), {"cliente": "ana", "turno": "almoco"})
        self.assertEqual(len(response.json()), 1)

    def test_invalid_filter(self):
        response = self.client.get(reverse("orders:order_list"), {"status": "perdido"})
        self.assertEqual(response.status_code, 400)


class OrderItemApiTest(TestCase):
    def setUp(self):
        zona = Zone.objects.create(bairro="Centro", taxa=Decimal("5.00"))
        cliente = Customer.objects.create(telefone="987654321", nome="Ana Souza", endereco="Rua A, 10", zona=zona)
        self.x1 = Item.objects.create(codigo="X1", nome="Marmita", preco=Decimal("10.00"))
        Item.objects.create(codigo="X2", nome="Refrigerante", preco=Decimal("4.50"))
        self.order = Order.objects.create(
            cliente=cliente, zona=zona, turno="almoco", forma_pagamento="dinheiro", endereco="Rua A, 10"
        )
        OrderItem.objects.create(pedido=self.order, item=self.x1, quantidade=1)

    def _url(self, codigo=None):
        if codigo is None:
            return reverse("orders:order_item_list", kwargs={"pedido_id": self.order.id})
        return reverse("orders:order_item_detail", kwargs={"pedido_id": self.order.id, "codigo": codigo})

    def test_list_lines(self):
        response = self.client.get(self._url())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()[0]["total"], 10.0)

    def test_add_line(self):
        response = self.client.post(self._url(), {"codigo": "X2", "quantidade": 2}, content_type="application/json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["total"], 9.0)

    def test_add_repeated_line(self):
        response = self.client.post(self._url(), {"codigo": "X1", "quantidade": 1}, content_type="application/json")
        self.assertEqual(response.status_code, 409)

    def test_patch_line(self):
        response = self.client.patch(self._url("X1"), {"quantidade": 3}, content_type="application/json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["quantidade"], 3)

    def test_patch_line_with_zero_quantity(self):
        response = self.client.patch(self._url("X1"), {"quantidade": 0}, content_type="application/json")
        self.assertEqual(response.status_code, 400)

    def test_delete_last_line(self):
        response = self.client.delete(self._url("X1"))
        self.assertEqual(response.status_code, 400)

    def test_missing_line(self):
        self.assertEqual(self.client.get(self._url("X2")).status_code, 404)
