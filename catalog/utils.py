import logging

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import ProtectedError, Q

from gestao_pedidos.errors import ConflictError, NotFoundError

from .models import Item
from .serializers import item_to_dict

logger = logging.getLogger(__name__)


def get_item(codigo, using=DEFAULT_DB_ALIAS):
    try:
        return Item.objects.using(using).get(codigo=codigo)
    except Item.DoesNotExist:
        raise NotFoundError(f"Item {codigo} não encontrado")


def list_items(q=None, using=DEFAULT_DB_ALIAS):
    """All items, or those whose name or code contains `q` (case-insensitive)."""
    items = Item.objects.using(using).all()
    if q:
        items = items.filter(Q(nome__icontains=q) | Q(codigo__icontains=q))
    return list(items)


def create_item(codigo, nome, preco, using=DEFAULT_DB_ALIAS):
    try:
        with transaction.atomic(using=using):
            item = Item.objects.using(using).create(codigo=codigo, nome=nome, preco=preco)
    except IntegrityError:
        raise ConflictError(f"Item {codigo} já existe")
    logger.info("Item %s created", item.codigo)
    return item


def update_item(codigo, using=DEFAULT_DB_ALIAS, **fields):
    item = get_item(codigo, using=using)
    for field, value in fields.items():
        setattr(item, field, value)
    if fields:
        item.save(using=using, update_fields=list(fields))
    return item


def delete_item(codigo, using=DEFAULT_DB_ALIAS):
    item = get_item(codigo, using=using)
    snapshot = item_to_dict(item)
    try:
        item.delete(using=using)
    except ProtectedError:
        raise ConflictError(f"Item {codigo} está em pedidos e não pode ser removido")
    logger.info("Item %s deleted", codigo)
    return snapshot
