import logging
from datetime import date, datetime
from decimal import Decimal

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.utils import timezone

from catalog.models import Item
from customer.utils import get_customer
from gestao_pedidos.errors import ConflictError, NotFoundError, TransactionError, ValidationError
from zones.utils import get_zone

from .models import Order, OrderItem
from .serializers import order_item_to_dict, order_to_dict

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND = "Pedido não encontrado"
ORDER_UPDATE_FIELDS = {"status", "data_hora", "zona_id", "observacao", "turno", "forma_pagamento", "endereco"}


def _choice_values(choices):
    return {value for value, _ in choices}


def _orders(using):
    return (
        Order.objects.using(using)
        .select_related("cliente", "cliente__zona", "zona")
        .prefetch_related("itens__item")
    )


def validate_order_lines(itens):
    """
    Validate the line list of an order submission.

    Args:
        itens: List of dicts with 'codigo', 'quantidade' and optional 'observacao' keys

    Returns:
        List of cleaned dicts with the same keys

    Raises:
        ValidationError: If the list is empty, a line is malformed or a code repeats
    """
    if not itens:
        raise ValidationError("O pedido precisa de pelo menos um item.")

    if not isinstance(itens, (list, tuple)):
        raise ValidationError("itens deve ser uma lista")

    linhas = []
    codigos = set()
    for i, linha in enumerate(itens):
        if not isinstance(linha, dict):
            raise ValidationError(f"O item {i} deve ser um dicionário")

        codigo = str(linha.get("codigo") or "").strip()
        if not codigo:
            raise ValidationError(f"O item {i} não tem código")

        quantidade = linha.get("quantidade")
        if isinstance(quantidade, bool) or not isinstance(quantidade, int):
            raise ValidationError(f"O item {codigo} tem uma quantidade inválida (deve ser inteiro)")
        if quantidade < 1:
            raise ValidationError(f"O item {codigo} tem uma quantidade inválida (mínimo 1)")

        if codigo in codigos:
            raise ValidationError(f"O item {codigo} aparece mais de uma vez no pedido")
        codigos.add(codigo)

        linhas.append({"codigo": codigo, "quantidade": quantidade, "observacao": linha.get("observacao") or None})

    return linhas


def validate_order_submission(
    telefone_cliente, endereco, zona_id, turno, forma_pagamento, itens, status=Order.STATUS_PENDENTE
):
    """Check everything an order needs before touching the database."""
    if not telefone_cliente or not str(telefone_cliente).strip():
        raise ValidationError("Informe o telefone do cliente.")
    if not endereco or not str(endereco).strip():
        raise ValidationError("Informe o endereço de entrega.")
    if not zona_id:
        raise ValidationError("Selecione a zona de entrega.")
    if not turno:
        raise ValidationError("Selecione o turno.")
    if turno not in _choice_values(Order.TURNO_CHOICES):
        raise ValidationError(f"Turno inválido: {turno}")
    if forma_pagamento not in _choice_values(Order.FORMA_PAGAMENTO_CHOICES):
        raise ValidationError(f"Forma de pagamento inválida: {forma_pagamento}")
    if status not in _choice_values(Order.STATUS_CHOICES):
        raise ValidationError(f"Status inválido: {status}")
    return validate_order_lines(itens)


def _resolve_items(linhas, using):
    codigos = [linha["codigo"] for linha in linhas]
    items = Item.objects.using(using).in_bulk(codigos)
    faltando = [codigo for codigo in codigos if codigo not in items]
    if faltando:
        raise NotFoundError(f"Item não encontrado: {', '.join(faltando)}")
    return items


def _create_lines(order, linhas, items, using):
    OrderItem.objects.using(using).bulk_create(
        [
            OrderItem(
                pedido=order,
                item=items[linha["codigo"]],
                quantidade=linha["quantidade"],
                observacao=linha["observacao"],
            )
            for linha in linhas
        ]
    )


def calculate_order_totals(order):
    """
    Compose the totals of a stored order.

    Prices are not stored with the order; they come from the catalog and the
    zone at read time.

    Returns:
        Dict with 'subtotal', 'taxa_entrega' and 'total' as Decimals
    """
    subtotal = order.subtotal
    taxa_entrega = Decimal(order.taxa_entrega)
    return {
        "subtotal": subtotal.quantize(Decimal("0.01")),
        "taxa_entrega": taxa_entrega.quantize(Decimal("0.01")),
        "total": (subtotal + taxa_entrega).quantize(Decimal("0.01")),
    }


def get_order(pedido_id, using=DEFAULT_DB_ALIAS):
    try:
        return _orders(using).get(pk=pedido_id)
    except Order.DoesNotExist:
        raise NotFoundError(ORDER_NOT_FOUND)


def list_orders(using=DEFAULT_DB_ALIAS):
    return list(_orders(using).all())


def _month_range(mes):
    inicio = timezone.make_aware(datetime(mes.year, mes.month, 1))
    if mes.month == 12:
        fim = timezone.make_aware(datetime(mes.year + 1, 1, 1))
    else:
        fim = timezone.make_aware(datetime(mes.year, mes.month + 1, 1))
    return inicio, fim


def list_orders_filtered(
    cliente=None, status=None, turno=None, mes=None, ordem="mais_recentes", using=DEFAULT_DB_ALIAS
):
    """
    Orders matching every filter given.

    Args:
        cliente: part of the customer name, case-insensitive
        status: exact status
        turno: exact shift
        mes: any date inside the wanted month (project time zone)
        ordem: 'mais_recentes' (newest first) or 'mais_antigos'
    """
    if ordem not in ("mais_recentes", "mais_antigos"):
        raise ValidationError(f"Ordem inválida: {ordem}")

    orders = _orders(using)

    if cliente:
        orders = orders.filter(cliente__nome__icontains=cliente)

    if status:
        orders = orders.filter(status=status)

    if turno:
        orders = orders.filter(turno=turno)

    if mes:
        if not isinstance(mes, date):
            raise ValidationError("mes deve ser uma data")
        inicio, fim = _month_range(mes)
        orders = orders.filter(data_hora__gte=inicio, data_hora__lt=fim)

    orders = orders.order_by("-data_hora" if ordem == "mais_recentes" else "data_hora")

    return list(orders)


def create_order(
    telefone_cliente,
    endereco,
    zona_id,
    turno,
    itens,
    forma_pagamento="dinheiro",
    observacao=None,
    status=Order.STATUS_PENDENTE,
    data_hora=None,
    using=DEFAULT_DB_ALIAS,
):
    """
    Create an order and all its lines in one transaction.

    No server-side pricing happens here; lines only reference catalog items.
    Submitting the same payload twice creates two orders.

    Returns:
        The created Order with lines, customer and zone loaded

    Raises:
        ValidationError: missing phone/zone/shift, empty or malformed lines (nothing is written)
        NotFoundError: customer, zone or item does not exist
        TransactionError: the write failed and was rolled back
    """
    linhas = validate_order_submission(telefone_cliente, endereco, zona_id, turno, forma_pagamento, itens, status)

    try:
        with transaction.atomic(using=using):
            cliente = get_customer(telefone_cliente, using=using)
            zona = get_zone(zona_id, using=using)
            items = _resolve_items(linhas, using)

            order = Order.objects.using(using).create(
                status=status,
                cliente=cliente,
                data_hora=data_hora or timezone.now(),
                zona=zona,
                observacao=observacao or None,
                turno=turno,
                forma_pagamento=forma_pagamento,
                endereco=endereco,
            )
            _create_lines(order, linhas, items, using)
    except IntegrityError:
        logger.exception("Failed to create order for customer %s", telefone_cliente)
        raise TransactionError("Erro ao criar pedido. Nenhuma alteração foi salva.")

    logger.info("Order %s created for customer %s with %d item(s)", order.id, cliente.telefone, len(linhas))
    return get_order(order.id, using=using)


def update_order(pedido_id, itens=None, using=DEFAULT_DB_ALIAS, **fields):
    """
    Update an order's fields and, when `itens` is given, replace all its lines.

    The line replacement is a full replace (delete then recreate), not a merge.
    Everything runs in one transaction: on any error the order is left as it was.

    Raises:
        NotFoundError: order, new zone or an item does not exist
        ValidationError: unknown field, invalid choice or invalid line list
        TransactionError: the write failed and was rolled back
    """
    desconhecidos = set(fields) - ORDER_UPDATE_FIELDS
    if desconhecidos:
        raise ValidationError(f"Campos não editáveis: {', '.join(sorted(desconhecidos))}")

    order = get_order(pedido_id, using=using)

    linhas = validate_order_lines(itens) if itens is not None else None

    if "status" in fields and fields["status"] not in _choice_values(Order.STATUS_CHOICES):
        raise ValidationError(f"Status inválido: {fields['status']}")
    if "turno" in fields and fields["turno"] not in _choice_values(Order.TURNO_CHOICES):
        raise ValidationError(f"Turno inválido: {fields['turno']}")
    if "forma_pagamento" in fields and fields["forma_pagamento"] not in _choice_values(Order.FORMA_PAGAMENTO_CHOICES):
        raise ValidationError(f"Forma de pagamento inválida: {fields['forma_pagamento']}")

    fields = dict(fields)
    if "observacao" in fields:
        fields["observacao"] = fields["observacao"] or None

    try:
        with transaction.atomic(using=using):
            if "zona_id" in fields:
                order.zona = get_zone(fields.pop("zona_id"), using=using)

            for field, value in fields.items():
                setattr(order, field, value)
            order.save(using=using)

            if linhas is not None:
                items = _resolve_items(linhas, using)
                OrderItem.objects.using(using).filter(pedido=order).delete()
                _create_lines(order, linhas, items, using)
    except IntegrityError:
        logger.exception("Failed to update order %s", pedido_id)
        raise TransactionError("Erro ao atualizar pedido. Nenhuma alteração foi salva.")

    logger.info("Order %s updated%s", pedido_id, " (lines replaced)" if linhas is not None else "")
    return get_order(pedido_id, using=using)


def delete_order(pedido_id, using=DEFAULT_DB_ALIAS):
    """
    Delete an order and its lines in one transaction.

    Returns:
        Dict snapshot of the order as it was before deletion
    """
    order = get_order(pedido_id, using=using)
    snapshot = order_to_dict(order)

    try:
        with transaction.atomic(using=using):
            OrderItem.objects.using(using).filter(pedido_id=pedido_id).delete()
            Order.objects.using(using).filter(pk=pedido_id).delete()
    except IntegrityError:
        logger.exception("Failed to delete order %s", pedido_id)
        raise TransactionError("Erro ao excluir pedido. Nenhuma alteração foi salva.")

    logger.info("Order %s deleted", pedido_id)
    return snapshot


def get_order_item(pedido_id, codigo, using=DEFAULT_DB_ALIAS):
    try:
        return OrderItem.objects.using(using).select_related("item").get(pedido_id=pedido_id, item_id=codigo)
    except OrderItem.DoesNotExist:
        raise NotFoundError("Item não encontrado neste pedido.")


def list_order_items(pedido_id, using=DEFAULT_DB_ALIAS):
    order = get_order(pedido_id, using=using)
    return list(order.itens.all())


def add_order_item(pedido_id, codigo, quantidade, observacao=None, using=DEFAULT_DB_ALIAS):
    (linha,) = validate_order_lines([{"codigo": codigo, "quantidade": quantidade, "observacao": observacao}])
    order = get_order(pedido_id, using=using)

    if OrderItem.objects.using(using).filter(pedido=order, item_id=linha["codigo"]).exists():
        raise ConflictError("Este item já foi adicionado ao pedido.")

    items = _resolve_items([linha], using)
    try:
        with transaction.atomic(using=using):
            _create_lines(order, [linha], items, using)
    except IntegrityError:
        logger.exception("Failed to add item %s to order %s", codigo, pedido_id)
        raise TransactionError("Erro ao adicionar item ao pedido.")

    return get_order_item(pedido_id, linha["codigo"], using=using)


def update_order_item(pedido_id, codigo, using=DEFAULT_DB_ALIAS, **fields):
    linha = get_order_item(pedido_id, codigo, using=using)

    if "quantidade" in fields:
        quantidade = fields["quantidade"]
        if isinstance(quantidade, bool) or not isinstance(quantidade, int) or quantidade < 1:
            raise ValidationError("Quantidade mínima é 1")
        linha.quantidade = quantidade

    if "observacao" in fields:
        linha.observacao = fields["observacao"] or None

    linha.save(using=using)
    return linha


def delete_order_item(pedido_id, codigo, using=DEFAULT_DB_ALIAS):
    """
    Remove one line from an order. The last line cannot be removed; delete
    the order instead.
    """
    linha = get_order_item(pedido_id, codigo, using=using)
    snapshot = order_item_to_dict(linha)

    with transaction.atomic(using=using):
        # Serializes line removals on the same order
        Order.objects.using(using).select_for_update().filter(pk=pedido_id).first()
        if OrderItem.objects.using(using).filter(pedido_id=pedido_id).count() == 1:
            raise ValidationError("O pedido precisa de pelo menos um item. Exclua o pedido em vez disso.")
        OrderItem.objects.using(using).filter(pk=linha.pk).delete()

    return snapshot
