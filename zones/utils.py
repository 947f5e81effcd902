import logging

from django.db import DEFAULT_DB_ALIAS
from django.db.models import ProtectedError

from gestao_pedidos.errors import ConflictError, NotFoundError

from .models import Zone
from .serializers import zone_to_dict

logger = logging.getLogger(__name__)

ZONE_NOT_FOUND = "Zona não encontrada"


def get_zone(zona_id, using=DEFAULT_DB_ALIAS):
    try:
        return Zone.objects.using(using).get(pk=zona_id)
    except Zone.DoesNotExist:
        raise NotFoundError(ZONE_NOT_FOUND)


def list_zones(using=DEFAULT_DB_ALIAS):
    return list(Zone.objects.using(using).all())


def create_zone(bairro, taxa, using=DEFAULT_DB_ALIAS):
    zone = Zone.objects.using(using).create(bairro=bairro, taxa=taxa)
    logger.info("Zone %s (%s) created", zone.id, zone.bairro)
    return zone


def update_zone(zona_id, using=DEFAULT_DB_ALIAS, **fields):
    """Apply a partial update. Only the fields passed in change."""
    zone = get_zone(zona_id, using=using)
    for field, value in fields.items():
        setattr(zone, field, value)
    if fields:
        zone.save(using=using, update_fields=list(fields))
    return zone


def delete_zone(zona_id, using=DEFAULT_DB_ALIAS):
    zone = get_zone(zona_id, using=using)
    snapshot = zone_to_dict(zone)
    try:
        zone.delete(using=using)
    except ProtectedError:
        raise ConflictError("Zona possui clientes ou pedidos vinculados e não pode ser removida")
    logger.info("Zone %s deleted", zona_id)
    return snapshot
