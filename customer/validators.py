"""Phone and CPF helpers for local (no area code) Brazilian numbers."""

import re

from gestao_pedidos.errors import ValidationError

PHONE_LENGTHS = (8, 9)
CPF_LENGTH = 11


def only_digits(value):
    return re.sub(r"\D", "", value or "")


def is_valid_phone(value):
    return len(only_digits(value)) in PHONE_LENGTHS


def normalize_phone(value):
    """
    Strip formatting from a phone number and check its length.

    Raises:
        ValidationError: if the number does not have 8 or 9 digits
    """
    digits = only_digits(value)
    if len(digits) not in PHONE_LENGTHS:
        raise ValidationError("Telefone deve ter 8 ou 9 dígitos.")
    return digits


def normalize_cpf(value):
    """Empty CPF is allowed; otherwise it must have 11 digits."""
    digits = only_digits(value)
    if not digits:
        return None
    if len(digits) != CPF_LENGTH:
        raise ValidationError("CPF deve ter 11 dígitos.")
    return digits


def format_phone(value):
    """
    8 digits: XXXX-XXXX (landline)
    9 digits: XXXXX-XXXX (mobile)
    """
    v = only_digits(value)[:9]
    if len(v) <= 4:
        return v
    if len(v) <= 8:
        return f"{v[:4]}-{v[4:]}"
    return f"{v[:5]}-{v[5:]}"


def format_cpf(value):
    v = only_digits(value)[:11]
    if len(v) <= 3:
        return v
    if len(v) <= 6:
        return f"{v[:3]}.{v[3:]}"
    if len(v) <= 9:
        return f"{v[:3]}.{v[3:6]}.{v[6:]}"
    return f"{v[:3]}.{v[3:6]}.{v[6:9]}-{v[9:]}"
