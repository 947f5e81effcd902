from decimal import Decimal

from django.test import SimpleTestCase, TestCase
from django.urls import reverse

from gestao_pedidos.errors import ConflictError, NotFoundError, ValidationError
from orders.models import Order
from zones.models import Zone

from .models import Customer
from .utils import create_customer, delete_customer, get_customer, list_customers, update_customer
from .validators import format_cpf, format_phone, is_valid_phone, normalize_cpf, normalize_phone


class ValidatorsTest(SimpleTestCase):
    def test_phone_lengths(self):
        self.assertTrue(is_valid_phone("98765-4321"))
        self.assertTrue(is_valid_phone("3232-1010"))
        self.assertFalse(is_valid_phone("1234567"))
        self.assertFalse(is_valid_phone("1234567890"))

    def test_normalize_phone_strips_formatting(self):
        self.assertEqual(normalize_phone("(9) 8765-4321"), "987654321")

    def test_normalize_phone_rejects_wrong_length(self):
        with self.assertRaises(ValidationError):
            normalize_phone("123")

    def test_cpf(self):
        self.assertIsNone(normalize_cpf(""))
        self.assertEqual(normalize_cpf("123.456.789-01"), "12345678901")
        with self.assertRaises(ValidationError):
            normalize_cpf("123")

    def test_formatting(self):
        self.assertEqual(format_phone("987654321"), "98765-4321")
        self.assertEqual(format_phone("32321010"), "3232-1010")
        self.assertEqual(format_cpf("12345678901"), "123.456.789-01")


class CustomerUtilsTest(TestCase):
    def setUp(self):
        self.zona = Zone.objects.create(bairro="Centro", taxa=Decimal("5.00"))
        self.customer = create_customer(
            telefone="987654321", nome="Ana Souza", endereco="Rua das Flores, 10", zona_id=self.zona.id
        )

    def test_lookup_by_phone(self):
        self.assertEqual(get_customer("987654321").nome, "Ana Souza")

    def test_lookup_accepts_formatted_phone(self):
        self.assertEqual(get_customer("98765-4321").telefone, "987654321")

    def test_lookup_missing_phone(self):
        with self.assertRaises(NotFoundError) as ctx:
            get_customer("912345678")
        self.assertEqual(ctx.exception.message, "Cliente não encontrado")

    def test_duplicate_phone(self):
        with self.assertRaises(ConflictError):
            create_customer(telefone="98765-4321", nome="Outra", endereco="Rua B, 2", zona_id=self.zona.id)

    def test_create_with_missing_zone(self):
        with self.assertRaises(NotFoundError):
            create_customer(telefone="912345678", nome="Bruno", endereco="Rua C, 3", zona_id=9999)
        self.assertFalse(Customer.objects.filter(pk="912345678").exists())

    def test_partial_update(self):
        nova_zona = Zone.objects.create(bairro="Vila Nova", taxa=Decimal("7.00"))
        update_customer("987654321", zona_id=nova_zona.id, cpf="12345678901")
        customer = Customer.objects.get(pk="987654321")
        self.assertEqual(customer.zona, nova_zona)
        self.assertEqual(customer.cpf, "12345678901")
        self.assertEqual(customer.nome, "Ana Souza")

    def test_update_missing_customer(self):
        with self.assertRaises(NotFoundError):
            update_customer("912345678", nome="Ninguém")

    def test_list(self):
        self.assertEqual([c.telefone for c in list_customers()], ["987654321"])

    def test_delete_then_not_found(self):
        snapshot = delete_customer("987654321")
        self.assertEqual(snapshot["nome"], "Ana Souza")
        with self.assertRaises(NotFoundError):
            get_customer("987654321")

    def test_delete_customer_with_orders(self):
        Order.objects.create(
            cliente=self.customer, zona=self.zona, turno="jantar", forma_pagamento="pix", endereco="Rua A, 1"
        )
        with self.assertRaises(ConflictError):
            delete_customer("987654321")


class CustomerApiTest(TestCase):
    def setUp(self):
        self.zona = Zone.objects.create(bairro="Centro", taxa=Decimal("5.00"))

    def _register(self, **overrides):
        data = {
            "telefone": "98765-4321",
            "nome": "Ana Souza",
            "cpf": "123.456.789-01",
            "endereco": "Rua das Flores, 10",
            "zona_id": self.zona.id,
            **overrides,
        }
        return self.client.post(reverse("customer:customer_list"), data, content_type="application/json")

    def test_register(self):
        response = self._register()
        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["telefone"], "987654321")
        self.assertEqual(data["telefone_formatado"], "98765-4321")
        self.assertEqual(data["cpf"], "123.456.789-01")
        self.assertEqual(data["zona"]["taxa"], 5.0)

    def test_register_invalid_phone(self):
        response = self._register(telefone="123")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "validation")
        self.assertFalse(Customer.objects.exists())

    def test_register_short_name(self):
        self.assertEqual(self._register(nome="Al").status_code, 400)

    def test_register_unknown_zone(self):
        self.assertEqual(self._register(zona_id=9999).status_code, 404)

    def test_lookup_unknown_phone(self):
        response = self.client.get(reverse("customer:customer_detail", kwargs={"telefone": "912345678"}))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "not_found")

    def test_patch(self):
        self._register()
        response = self.client.patch(
            reverse("customer:customer_detail", kwargs={"telefone": "987654321"}),
            {"endereco": "Avenida Brasil, 500"},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["endereco"], "Avenida Brasil, 500")
        self.assertEqual(response.json()["nome"], "Ana Souza")
