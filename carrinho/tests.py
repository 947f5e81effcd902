from decimal import Decimal

from django.test import SimpleTestCase, TestCase
from django.urls import reverse

from catalog.models import Item
from customer.models import Customer
from orders.models import Order
from zones.models import Zone

from . import cart as carts


class FakeItem:
    def __init__(self, codigo, nome, preco):
        self.codigo = codigo
        self.nome = nome
        self.preco = preco


class CartValueTest(SimpleTestCase):
    def setUp(self):
        self.x1 = FakeItem("X1", "Pastel", Decimal("10.00"))
        self.x2 = FakeItem("X2", "Caldo", Decimal("7.50"))

    def test_add_new_item_starts_with_one_unit(self):
        cart = carts.add_item(carts.Cart(), self.x1)
        self.assertEqual(len(cart.linhas), 1)
        self.assertEqual(cart.linhas[0].quantidade, 1)

    def test_add_existing_item_increments_quantity(self):
        cart = carts.add_item(carts.add_item(carts.Cart(), self.x1), self.x1)
        self.assertEqual(len(cart.linhas), 1)
        self.assertEqual(cart.linhas[0].quantidade, 2)

    def test_transitions_do_not_mutate_the_original(self):
        empty = carts.Cart()
        carts.add_item(empty, self.x1)
        self.assertEqual(empty.linhas, ())

    def test_remove_item(self):
        cart = carts.add_item(carts.add_item(carts.Cart(), self.x1), self.x2)
        cart = carts.remove_item(cart, "X1")
        self.assertEqual([linha.codigo for linha in cart.linhas], ["X2"])

    def test_remove_then_add_starts_over(self):
        cart = carts.add_item(carts.add_item(carts.Cart(), self.x1), self.x1)
        cart = carts.add_item(carts.remove_item(cart, "X1"), self.x1)
        self.assertEqual(cart.linhas[0].quantidade, 1)

    def test_update_quantity_and_observation(self):
        cart = carts.add_item(carts.Cart(), self.x1)
        cart = carts.update_item(cart, "X1", quantidade=3, observacao="sem cebola")
        self.assertEqual(cart.linhas[0].quantidade, 3)
        self.assertEqual(cart.linhas[0].observacao, "sem cebola")

    def test_invalid_quantities_become_one(self):
        for value in (0, -2, 101, "abc", None, "2.5"):
            with self.subTest(value=value):
                self.assertEqual(carts.coerce_quantity(value), 1)
        self.assertEqual(carts.coerce_quantity("7"), 7)
        self.assertEqual(carts.coerce_quantity(100), 100)

    def test_totals(self):
        cart = carts.add_item(carts.add_item(carts.Cart(), self.x1), self.x1)
        cart = carts.update_delivery(cart, zona_id=1)
        totals = carts.cart_totals(cart, {1: Decimal("5.00")})
        self.assertEqual(totals["subtotal"], Decimal("20.00"))
        self.assertEqual(totals["taxa_entrega"], Decimal("5.00"))
        self.assertEqual(totals["total"], Decimal("25.00"))

    def test_no_zone_means_no_fee(self):
        cart = carts.add_item(carts.Cart(), self.x1)
        self.assertEqual(carts.cart_delivery_fee(cart, {1: Decimal("5.00")}), Decimal("0.00"))
        self.assertEqual(carts.cart_total(cart, {1: Decimal("5.00")}), carts.cart_subtotal(cart))

    def test_customer_defaults_keep_chosen_address(self):
        customer = Customer(telefone="987654321", nome="Ana", endereco="Rua A, 10", zona_id=3)
        cart = carts.update_delivery(carts.Cart(), endereco="Rua B, 20")
        cart = carts.with_customer_defaults(cart, customer)
        self.assertEqual(cart.entrega.telefone, "987654321")
        self.assertEqual(cart.entrega.endereco, "Rua B, 20")
        self.assertEqual(cart.entrega.zona_id, 3)

    def test_session_representation(self):
        cart = carts.add_item(carts.Cart(), self.x2)
        cart = carts.update_delivery(cart, turno="jantar", zona_id=2)
        self.assertEqual(carts.cart_from_dict(carts.cart_to_dict(cart)), cart)
        self.assertEqual(carts.cart_from_dict(None), carts.Cart())

    def test_order_lines(self):
        cart = carts.update_item(carts.add_item(carts.Cart(), self.x1), "X1", quantidade=2)
        self.assertEqual(
            carts.cart_to_order_lines(cart), [{"codigo": "X1", "quantidade": 2, "observacao": ""}]
        )


class CartApiTest(TestCase):
    def setUp(self):
        self.zona = Zone.objects.create(bairro="Centro", taxa=Decimal("5.00"))
        self.item = Item.objects.create(codigo="X1", nome="Pastel", preco=Decimal("10.00"))
        self.customer = Customer.objects.create(
            telefone="987654321", nome="Ana Souza", endereco="Rua das Flores, 10", zona=self.zona
        )

    def _add(self, codigo="X1"):
        return self.client.post(reverse("carrinho:cart_item_list"), {"codigo": codigo}, content_type="application/json")

    def test_empty_cart(self):
        response = self.client.get(reverse("carrinho:cart"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["linhas"], [])
        self.assertEqual(response.json()["total"], 0.0)

    def test_add_unknown_item(self):
        response = self._add("NOPE")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "not_found")

    def test_add_and_update_item(self):
        self.assertEqual(self._add().status_code, 201)
        response = self.client.patch(
            reverse("carrinho:cart_item_detail", kwargs={"codigo": "X1"}),
            {"quantidade": 500},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["linhas"][0]["quantidade"], 1)

    def test_remove_item_not_in_cart_keeps_cart(self):
        self._add()
        response = self.client.delete(reverse("carrinho:cart_item_detail", kwargs={"codigo": "X9"}))
        self.assertEqual(response.status_code, 200)
        self.assertEqual([(linha["codigo"], linha["quantidade"]) for linha in response.json()["linhas"]], [("X1", 1)])

    def test_update_item_not_in_cart(self):
        response = self.client.patch(
            reverse("carrinho:cart_item_detail", kwargs={"codigo": "X9"}),
            {"quantidade": 2},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 404)

    def test_delivery_with_unknown_zone(self):
        response = self.client.patch(
            reverse("carrinho:cart_delivery"), {"zona_id": 999}, content_type="application/json"
        )
        self.assertEqual(response.status_code, 404)

    def test_checkout_creates_order_and_clears_cart(self):
        self._add()
        self._add()
        self.client.post(reverse("carrinho:cart_customer"), {"telefone": "98765-4321"}, content_type="application/json")
        self.client.patch(reverse("carrinho:cart_delivery"), {"turno": "almoco"}, content_type="application/json")

        cart = self.client.get(reverse("carrinho:cart")).json()
        self.assertEqual(cart["subtotal"], 20.0)
        self.assertEqual(cart["taxa_entrega"], 5.0)
        self.assertEqual(cart["total"], 25.0)

        response = self.client.post(reverse("carrinho:cart_checkout"))
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["total"], 25.0)
        self.assertEqual(Order.objects.count(), 1)
        self.assertEqual(self.client.get(reverse("carrinho:cart")).json()["linhas"], [])

    def test_checkout_without_shift_writes_nothing(self):
        self._add()
        self.client.post(reverse("carrinho:cart_customer"), {"telefone": "987654321"}, content_type="application/json")
        response = self.client.post(reverse("carrinho:cart_checkout"))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(len(self.client.get(reverse("carrinho:cart")).json()["linhas"]), 1)
