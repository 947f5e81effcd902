from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from customer.models import Customer
from gestao_pedidos.errors import ConflictError, NotFoundError

from .models import Zone
from .utils import create_zone, delete_zone, get_zone, list_zones, update_zone


class ZoneUtilsTest(TestCase):
    def setUp(self):
        self.zona = create_zone(bairro="Centro", taxa=Decimal("5.00"))

    def test_create_and_get(self):
        zona = get_zone(self.zona.id)
        self.assertEqual(zona.bairro, "Centro")
        self.assertEqual(zona.taxa, Decimal("5.00"))

    def test_get_missing_zone(self):
        with self.assertRaises(NotFoundError):
            get_zone(9999)

    def test_list_is_ordered_by_neighbourhood(self):
        create_zone(bairro="Alvorada", taxa=Decimal("3.00"))
        self.assertEqual([zona.bairro for zona in list_zones()], ["Alvorada", "Centro"])

    def test_partial_update_keeps_other_fields(self):
        update_zone(self.zona.id, taxa=Decimal("6.50"))
        zona = Zone.objects.get(pk=self.zona.id)
        self.assertEqual(zona.taxa, Decimal("6.50"))
        self.assertEqual(zona.bairro, "Centro")

    def test_update_missing_zone(self):
        with self.assertRaises(NotFoundError):
            update_zone(9999, taxa=Decimal("1.00"))

    def test_delete_returns_snapshot(self):
        snapshot = delete_zone(self.zona.id)
        self.assertEqual(snapshot, {"id": self.zona.id, "bairro": "Centro", "taxa": 5.0})
        with self.assertRaises(NotFoundError):
            get_zone(self.zona.id)

    def test_delete_zone_in_use(self):
        Customer.objects.create(telefone="987654321", nome="Ana", endereco="Rua A, 1", zona=self.zona)
        with self.assertRaises(ConflictError):
            delete_zone(self.zona.id)
        self.assertTrue(Zone.objects.filter(pk=self.zona.id).exists())


class ZoneApiTest(TestCase):
    def setUp(self):
        self.zona = Zone.objects.create(bairro="Centro", taxa=Decimal("5.00"))

    def test_list(self):
        response = self.client.get(reverse("zones:zone_list"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [{"id": self.zona.id, "bairro": "Centro", "taxa": 5.0}])

    def test_create(self):
        response = self.client.post(
            reverse("zones:zone_list"), {"bairro": "Vila Nova", "taxa": "7.25"}, content_type="application/json"
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["taxa"], 7.25)
        self.assertTrue(Zone.objects.filter(bairro="Vila Nova").exists())

    def test_create_with_negative_fee(self):
        response = self.client.post(
            reverse("zones:zone_list"), {"bairro": "Vila Nova", "taxa": "-1"}, content_type="application/json"
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "validation")

    def test_patch(self):
        response = self.client.patch(
            reverse("zones:zone_detail", kwargs={"zona_id": self.zona.id}),
            {"bairro": "Centro Histórico"},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["bairro"], "Centro Histórico")
        self.assertEqual(response.json()["taxa"], 5.0)

    def test_missing_zone(self):
        response = self.client.get(reverse("zones:zone_detail", kwargs={"zona_id": 9999}))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "not_found", "message": "Zona não encontrada"})

    def test_delete(self):
        response = self.client.delete(reverse("zones:zone_detail", kwargs={"zona_id": self.zona.id}))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Zone.objects.exists())
