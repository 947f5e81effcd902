import logging

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import ProtectedError

from gestao_pedidos.errors import ConflictError, NotFoundError
from zones.utils import get_zone

from .models import Customer
from .serializers import customer_to_dict
from .validators import normalize_phone, only_digits

logger = logging.getLogger(__name__)

CUSTOMER_NOT_FOUND = "Cliente não encontrado"


def get_customer(telefone, using=DEFAULT_DB_ALIAS):
    try:
        return Customer.objects.using(using).select_related("zona").get(telefone=only_digits(telefone))
    except Customer.DoesNotExist:
        raise NotFoundError(CUSTOMER_NOT_FOUND)


def list_customers(using=DEFAULT_DB_ALIAS):
    return list(Customer.objects.using(using).select_related("zona").all())


def create_customer(telefone, nome, endereco, zona_id, cpf=None, using=DEFAULT_DB_ALIAS):
    telefone = normalize_phone(telefone)
    zona = get_zone(zona_id, using=using)
    try:
        with transaction.atomic(using=using):
            customer = Customer.objects.using(using).create(
                telefone=telefone,
                nome=nome,
                cpf=cpf,
                endereco=endereco,
                zona=zona,
            )
    except IntegrityError:
        raise ConflictError("Cliente já existe com este telefone")
    logger.info("Customer %s registered", customer.telefone)
    return customer


def update_customer(telefone, using=DEFAULT_DB_ALIAS, **fields):
    """
    Partial update of a customer.

    Args:
        telefone: phone of the customer to update
        **fields: any of nome, cpf, endereco, zona_id

    Raises:
        NotFoundError: if the customer or the new zone does not exist
    """
    customer = get_customer(telefone, using=using)

    if "zona_id" in fields:
        customer.zona = get_zone(fields.pop("zona_id"), using=using)

    for field, value in fields.items():
        setattr(customer, field, value)

    customer.save(using=using)
    return customer


def delete_customer(telefone, using=DEFAULT_DB_ALIAS):
    customer = get_customer(telefone, using=using)
    snapshot = customer_to_dict(customer)
    try:
        customer.delete(using=using)
    except ProtectedError:
        raise ConflictError("Cliente possui pedidos e não pode ser removido")
    logger.info("Customer %s deleted", snapshot["telefone"])
    return snapshot
