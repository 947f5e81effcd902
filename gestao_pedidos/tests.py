from django.test import SimpleTestCase
from rest_framework import exceptions

from gestao_pedidos.errors import (
    ConflictError,
    NotFoundError,
    TransactionError,
    api_exception_handler,
    first_error_message,
)


class FirstErrorMessageTest(SimpleTestCase):
    def test_field_error(self):
        self.assertEqual(first_error_message({"turno": ["Obrigatório."]}), "turno: Obrigatório.")

    def test_non_field_error(self):
        self.assertEqual(first_error_message({"non_field_errors": ["Inválido."]}), "Inválido.")

    def test_nested_list_error(self):
        detail = {"itens": [{}, {"quantidade": ["Mínimo 1."]}]}
        self.assertEqual(first_error_message(detail), "itens: quantidade: Mínimo 1.")


class ExceptionHandlerTest(SimpleTestCase):
    def test_domain_errors(self):
        cases = [
            (NotFoundError("Zona não encontrada"), 404, "not_found"),
            (ConflictError(), 409, "conflict"),
            (TransactionError(), 500, "transaction"),
        ]
        for exc, status_code, code in cases:
            with self.subTest(code=code):
                response = api_exception_handler(exc, {})
                self.assertEqual(response.status_code, status_code)
                self.assertEqual(response.data["error"], code)
                self.assertEqual(response.data["message"], exc.message)

    def test_serializer_validation_error(self):
        response = api_exception_handler(exceptions.ValidationError({"bairro": ["Obrigatório."]}), {})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "validation")
        self.assertEqual(response.data["message"], "bairro: Obrigatório.")

    def test_framework_error(self):
        response = api_exception_handler(exceptions.MethodNotAllowed("PUT"), {})
        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.data["error"], "method_not_allowed")
