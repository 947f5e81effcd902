from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse

from catalog.models import Item
from customer.models import Customer
from gestao_pedidos.env import EnvConfig
from gestao_pedidos.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
import management
from orders.models import Order
from zones.models import Zone

from .apps import ManagementConfig
from .models import ConfigVariable
from .utils import (
    check_secret,
    create_variable,
    delete_variable,
    get_variable,
    list_variables,
    set_variable,
    update_variable,
)


def make_env(**overrides):
    values = {
        "DJANGO_DEBUG": False,
        "DJANGO_SECRET_KEY": "test",
        "ALLOWED_HOSTS": ["testserver"],
        "USE_POSTGRES": False,
        "POSTGRES_HOST": "",
        "POSTGRES_PORT": "",
        "POSTGRES_USER": "",
        "POSTGRES_PASSWORD": "",
        "POSTGRES_DB": "",
        "TIME_ZONE": "America/Sao_Paulo",
        "LOG_LEVEL": "INFO",
        "ADMIN_SECRET": "",
        "BASIC_SECRET": "",
        **overrides,
    }
    return EnvConfig(**values)


class ConfigVariableUtilsTest(TestCase):
    def setUp(self):
        create_variable("horarioAlmoco", "11:00-14:30")

    def test_get(self):
        self.assertEqual(get_variable("horarioAlmoco").valor, "11:00-14:30")

    def test_get_missing(self):
        with self.assertRaises(NotFoundError) as ctx:
            get_variable("inexistente")
        self.assertEqual(ctx.exception.message, "Variável não encontrada")

    def test_duplicate_name(self):
        with self.assertRaises(ConflictError):
            create_variable("horarioAlmoco", "12:00")

    def test_update(self):
        update_variable("horarioAlmoco", "11:30-15:00")
        self.assertEqual(ConfigVariable.objects.get(pk="horarioAlmoco").valor, "11:30-15:00")

    def test_set_creates_or_overwrites(self):
        set_variable("horarioAlmoco", "10:00")
        set_variable("horarioJantar", "18:00")
        self.assertEqual(
            [(v.nome, v.valor) for v in list_variables()], [("horarioAlmoco", "10:00"), ("horarioJantar", "18:00")]
        )

    def test_delete_then_not_found(self):
        self.assertEqual(delete_variable("horarioAlmoco"), {"nome": "horarioAlmoco", "valor": "11:00-14:30"})
        with self.assertRaises(NotFoundError):
            get_variable("horarioAlmoco")


class CheckSecretTest(TestCase):
    def setUp(self):
        ConfigVariable.objects.create(nome="senhaAdmin", valor="1234")

    def test_match(self):
        self.assertEqual(check_secret("admin", "1234"), {"success": True, "tipo": "admin"})

    def test_mismatch(self):
        with self.assertRaises(UnauthorizedError):
            check_secret("admin", "wrong")

    def test_secret_not_stored(self):
        with self.assertRaises(NotFoundError):
            check_secret("basic", "1234")

    def test_unknown_type(self):
        with self.assertRaises(ValidationError):
            check_secret("root", "1234")

    def test_comparison_is_exact(self):
        with self.assertRaises(UnauthorizedError):
            check_secret("admin", " 1234")


class ConfigVariableApiTest(TestCase):
    def test_crud(self):
        list_url = reverse("management:variable_list")
        response = self.client.post(list_url, {"nome": "taxaMinima", "valor": "3"}, content_type="application/json")
        self.assertEqual(response.status_code, 201)

        detail_url = reverse("management:variable_detail", kwargs={"nome": "taxaMinima"})
        response = self.client.patch(detail_url, {"valor": "4"}, content_type="application/json")
        self.assertEqual(response.json(), {"nome": "taxaMinima", "valor": "4"})

        self.assertEqual(self.client.get(list_url).json(), [{"nome": "taxaMinima", "valor": "4"}])
        self.assertEqual(self.client.delete(detail_url).status_code, 200)
        self.assertEqual(self.client.get(detail_url).status_code, 404)

    def test_duplicate(self):
        ConfigVariable.objects.create(nome="taxaMinima", valor="3")
        response = self.client.post(
            reverse("management:variable_list"), {"nome": "taxaMinima", "valor": "5"}, content_type="application/json"
        )
        self.assertEqual(response.status_code, 409)


class SecretCheckApiTest(TestCase):
    def setUp(self):
        ConfigVariable.objects.create(nome="senhaBasic", valor="4321")
        self.url = reverse("management:check_secret")

    def test_correct_password(self):
        response = self.client.post(self.url, {"tipo": "basic", "senha": "4321"}, content_type="application/json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "tipo": "basic"})

    def test_wrong_password(self):
        response = self.client.post(self.url, {"tipo": "basic", "senha": "0000"}, content_type="application/json")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "unauthorized")

    def test_invalid_type(self):
        response = self.client.post(self.url, {"tipo": "root", "senha": "4321"}, content_type="application/json")
        self.assertEqual(response.status_code, 400)

    def test_missing_secret(self):
        response = self.client.post(self.url, {"tipo": "admin", "senha": "4321"}, content_type="application/json")
        self.assertEqual(response.status_code, 404)


class InitialSecretsTest(TestCase):
    def test_only_non_empty_secrets_are_stored(self):
        self.assertEqual(make_env(ADMIN_SECRET="s3cret").get_initial_secrets(), {"senhaAdmin": "s3cret"})

    @patch("gestao_pedidos.env.getEnvConfig")
    def test_startup_stores_secrets(self, mock_env):
        mock_env.return_value = make_env(ADMIN_SECRET="admin", BASIC_SECRET="basic")
        ConfigVariable.objects.create(nome="senhaAdmin", valor="old")

        ManagementConfig("management", management)._store_initial_secrets()

        self.assertEqual(ConfigVariable.objects.get(pk="senhaAdmin").valor, "admin")
        self.assertEqual(ConfigVariable.objects.get(pk="senhaBasic").valor, "basic")

    @patch("management.apps.sys")
    def test_management_commands_skip_initialization(self, mock_sys):
        mock_sys.argv = ["manage.py", "migrate"]
        self.assertFalse(ManagementConfig("management", management)._should_initialize())


class SeedCommandTest(TestCase):
    def test_seed_all_apps(self):
        call_command("seed", stdout=StringIO())
        self.assertTrue(Zone.objects.exists())
        self.assertTrue(Item.objects.exists())
        self.assertEqual(Customer.objects.count(), 20)
        self.assertTrue(Order.objects.exists())
        self.assertTrue(ConfigVariable.objects.filter(pk="senhaAdmin").exists())
        for order in Order.objects.all():
            self.assertGreaterEqual(order.itens.count(), 1)

    def test_seed_single_app(self):
        call_command("seed", app=["catalog"], stdout=StringIO())
        self.assertTrue(Item.objects.exists())
        self.assertFalse(Zone.objects.exists())
