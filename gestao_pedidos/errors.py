"""
Domain errors raised by the procedures of every app, and the DRF exception
handler that turns them into JSON responses.

Every error reaches the caller as ``{"error": <code>, "message": <text>}``.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class DomainError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "error"
    default_message = "Erro ao processar a requisição."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Malformed or missing input, detected before any write."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation"
    default_message = "Dados inválidos."


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Registro não encontrado."


class ConflictError(DomainError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_message = "Registro já existe."


class UnauthorizedError(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"
    default_message = "Senha incorreta."


class TransactionError(DomainError):
    """A multi-row write failed and was rolled back."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "transaction"
    default_message = "Erro ao gravar os dados. Nenhuma alteração foi salva."


def first_error_message(detail):
    """Pick the first human-readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = first_error_message(value)
            if message:
                return message if field == "non_field_errors" else f"{field}: {message}"
        return None
    if isinstance(detail, list):
        for value in detail:
            message = first_error_message(value)
            if message:
                return message
        return None
    return str(detail)


def api_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return Response({"error": exc.code, "message": exc.message}, status=exc.status_code)

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {
                "error": ValidationError.code,
                "message": first_error_message(exc.detail) or ValidationError.default_message,
                "details": exc.detail,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
        response.data = {"error": getattr(exc, "default_code", "error"), "message": str(detail)}
        return response

    logger.exception("Unhandled error in %s", context.get("view").__class__.__name__)
    return None
