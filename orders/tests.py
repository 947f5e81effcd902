from datetime import date, datetime
from decimal import Decimal
from unittest.mock import patch

from django.db import IntegrityError
from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from catalog.models import Item
from customer.models import Customer
from gestao_pedidos.errors import ConflictError, NotFoundError, TransactionError, ValidationError
from zones.models import Zone

from orders.models import Order, OrderItem
from orders.utils import (
    add_order_item,
    calculate_order_totals,
    create_order,
    delete_order,
    delete_order_item,
    get_order,
    get_order_item,
    list_order_items,
    list_orders,
    list_orders_filtered,
    update_order,
    update_order_item,
    validate_order_lines,
    validate_order_submission,
)


class OrderFixtureMixin:
    """Customer 987654321 in a zone with a 5.00 fee, items X1 (10.00) and X2 (4.50)"""

    def setUp(self):
        self.zona = Zone.objects.create(bairro="Centro", taxa=Decimal("5.00"))
        self.cliente = Customer.objects.create(
            telefone="987654321", nome="Ana Souza", endereco="Rua das Flores, 10", zona=self.zona
        )
        self.x1 = Item.objects.create(codigo="X1", nome="Marmita", preco=Decimal("10.00"))
        self.x2 = Item.objects.create(codigo="X2", nome="Refrigerante", preco=Decimal("4.50"))

    def _create(self, itens=None, **overrides):
        data = {
            "telefone_cliente": "987654321",
            "endereco": "Rua das Flores, 10",
            "zona_id": self.zona.id,
            "turno": Order.TURNO_ALMOCO,
            "itens": itens if itens is not None else [{"codigo": "X1", "quantidade": 2}],
            **overrides,
        }
        return create_order(**data)


class ValidateOrderLinesTest(SimpleTestCase):
    def test_empty_list(self):
        with self.assertRaises(ValidationError):
            validate_order_lines([])

    def test_not_a_list(self):
        with self.assertRaises(ValidationError):
            validate_order_lines({"codigo": "X1", "quantidade": 1})

    def test_missing_code(self):
        with self.assertRaises(ValidationError):
            validate_order_lines([{"quantidade": 1}])

    def test_invalid_quantities(self):
        for quantidade in (0, -1, "2", 1.5, True, None):
            with self.subTest(quantidade=quantidade):
                with self.assertRaises(ValidationError):
                    validate_order_lines([{"codigo": "X1", "quantidade": quantidade}])

    def test_repeated_code(self):
        with self.assertRaises(ValidationError):
            validate_order_lines([{"codigo": "X1", "quantidade": 1}, {"codigo": "X1", "quantidade": 2}])

    def test_cleans_lines(self):
        linhas = validate_order_lines([{"codigo": " X1 ", "quantidade": 3, "observacao": ""}])
        self.assertEqual(linhas, [{"codigo": "X1", "quantidade": 3, "observacao": None}])

    def test_submission_requires_phone_zone_and_shift(self):
        itens = [{"codigo": "X1", "quantidade": 1}]
        cases = [
            ("", "Rua A", 1, "almoco"),
            ("987654321", "", 1, "almoco"),
            ("987654321", "Rua A", None, "almoco"),
            ("987654321", "Rua A", 1, ""),
            ("987654321", "Rua A", 1, "cafe"),
        ]
        for telefone, endereco, zona_id, turno in cases:
            with self.subTest(telefone=telefone, endereco=endereco, zona_id=zona_id, turno=turno):
                with self.assertRaises(ValidationError):
                    validate_order_submission(telefone, endereco, zona_id, turno, "dinheiro", itens)

    def test_submission_rejects_unknown_payment(self):
        with self.assertRaises(ValidationError):
            validate_order_submission("987654321", "Rua A", 1, "almoco", "cheque", [{"codigo": "X1", "quantidade": 1}])


class CreateOrderTest(OrderFixtureMixin, TestCase):
    def test_create_with_totals(self):
        order = self._create()
        self.assertEqual(order.status, Order.STATUS_PENDENTE)
        self.assertEqual(order.cliente, self.cliente)
        self.assertEqual(order.itens.count(), 1)
        self.assertEqual(
            calculate_order_totals(order),
            {"subtotal": Decimal("20.00"), "taxa_entrega": Decimal("5.00"), "total": Decimal("25.00")},
        )

    def test_create_several_lines(self):
        order = self._create(
            itens=[{"codigo": "X1", "quantidade": 1}, {"codigo": "X2", "quantidade": 2, "observacao": "gelado"}]
        )
        self.assertEqual(order.total, Decimal("24.00"))
        self.assertEqual(get_order_item(order.id, "X2").observacao, "gelado")

    def test_empty_lines_write_nothing(self):
        with self.assertRaises(ValidationError):
            self._create(itens=[])
        self.assertEqual(Order.objects.count(), 0)

    def test_missing_zone_writes_nothing(self):
        with self.assertRaises(ValidationError):
            self._create(zona_id=None)
        self.assertEqual(Order.objects.count(), 0)

    def test_missing_shift_writes_nothing(self):
        with self.assertRaises(ValidationError):
            self._create(turno="")
        self.assertEqual(Order.objects.count(), 0)

    def test_unknown_customer(self):
        with self.assertRaises(NotFoundError):
            self._create(telefone_cliente="912345678")
        self.assertEqual(Order.objects.count(), 0)

    def test_unknown_item_rolls_back(self):
        with self.assertRaises(NotFoundError):
            self._create(itens=[{"codigo": "X1", "quantidade": 1}, {"codigo": "NOPE", "quantidade": 1}])
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)

    def test_same_payload_twice_creates_two_orders(self):
        self._create()
        self._create()
        self.assertEqual(Order.objects.count(), 2)

    def test_totals_follow_current_prices(self):
        order = self._create()
        Item.objects.filter(pk="X1").update(preco=Decimal("12.00"))
        self.assertEqual(get_order(order.id).total, Decimal("29.00"))


class UpdateOrderTest(OrderFixtureMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.order = self._create()

    def test_update_fields(self):
        update_order(self.order.id, status=Order.STATUS_ENTREGUE, observacao="Portão azul")
        order = get_order(self.order.id)
        self.assertEqual(order.status, Order.STATUS_ENTREGUE)
        self.assertEqual(order.observacao, "Portão azul")
        self.assertEqual(order.turno, Order.TURNO_ALMOCO)

    def test_replace_lines(self):
        update_order(self.order.id, itens=[{"codigo": "X2", "quantidade": 3}])
        linhas = list_order_items(self.order.id)
        self.assertEqual([(linha.item_id, linha.quantidade) for linha in linhas], [("X2", 3)])

    def test_update_round_trip(self):
        outra_zona = Zone.objects.create(bairro="Vila Nova", taxa=Decimal("8.00"))
        update_order(
            self.order.id,
            zona_id=outra_zona.id,
            turno=Order.TURNO_JANTAR,
            itens=[{"codigo": "X1", "quantidade": 1}, {"codigo": "X2", "quantidade": 2}],
        )
        order = get_order(self.order.id)
        self.assertEqual(order.zona, outra_zona)
        self.assertEqual(order.turno, Order.TURNO_JANTAR)
        self.assertEqual(calculate_order_totals(order)["total"], Decimal("27.00"))

    def test_empty_replacement_is_rejected(self):
        with self.assertRaises(ValidationError):
            update_order(self.order.id, itens=[])
        self.assertEqual(OrderItem.objects.filter(pedido=self.order).count(), 1)

    def test_unknown_item_keeps_previous_state(self):
        with self.assertRaises(NotFoundError):
            update_order(self.order.id, status=Order.STATUS_CANCELADO, itens=[{"codigo": "NOPE", "quantidade": 1}])
        order = get_order(self.order.id)
        self.assertEqual(order.status, Order.STATUS_PENDENTE)
        self.assertEqual([linha.item_id for linha in order.itens.all()], ["X1"])

    def test_unknown_zone(self):
        with self.assertRaises(NotFoundError):
            update_order(self.order.id, zona_id=9999)

    def test_invalid_status(self):
        with self.assertRaises(ValidationError):
            update_order(self.order.id, status="perdido")

    def test_read_only_field(self):
        with self.assertRaises(ValidationError):
            update_order(self.order.id, cliente_id="912345678")

    def test_missing_order(self):
        with self.assertRaises(NotFoundError):
            update_order(9999, status=Order.STATUS_ENTREGUE)


class DeleteOrderTest(OrderFixtureMixin, TestCase):
    def test_delete_then_not_found(self):
        order = self._create()
        snapshot = delete_order(order.id)
        self.assertEqual(snapshot["id"], order.id)
        self.assertEqual(snapshot["total"], 25.0)
        self.assertEqual(OrderItem.objects.count(), 0)
        with self.assertRaises(NotFoundError):
            get_order(order.id)

    def test_delete_missing_order(self):
        with self.assertRaises(NotFoundError):
            delete_order(9999)


class OrderLineProceduresTest(OrderFixtureMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.order = self._create()

    def test_add_line(self):
        linha = add_order_item(self.order.id, "X2", 2, observacao="sem gelo")
        self.assertEqual(linha.quantidade, 2)
        self.assertEqual(len(list_order_items(self.order.id)), 2)

    def test_add_repeated_line(self):
        with self.assertRaises(ConflictError):
            add_order_item(self.order.id, "X1", 1)

    def test_add_unknown_item(self):
        with self.assertRaises(NotFoundError):
            add_order_item(self.order.id, "NOPE", 1)

    def test_add_to_missing_order(self):
        with self.assertRaises(NotFoundError):
            add_order_item(9999, "X2", 1)

    def test_update_line(self):
        update_order_item(self.order.id, "X1", quantidade=5)
        self.assertEqual(get_order_item(self.order.id, "X1").quantidade, 5)

    def test_update_line_invalid_quantity(self):
        with self.assertRaises(ValidationError):
            update_order_item(self.order.id, "X1", quantidade=0)

    def test_update_missing_line(self):
        with self.assertRaises(NotFoundError):
            update_order_item(self.order.id, "X2", quantidade=1)

    def test_delete_line(self):
        add_order_item(self.order.id, "X2", 1)
        snapshot = delete_order_item(self.order.id, "X2")
        self.assertEqual(snapshot["codigo"], "X2")
        with self.assertRaises(NotFoundError):
            get_order_item(self.order.id, "X2")

    def test_last_line_cannot_be_deleted(self):
        with self.assertRaises(ValidationError):
            delete_order_item(self.order.id, "X1")
        self.assertEqual(OrderItem.objects.filter(pedido=self.order).count(), 1)


class ListOrdersTest(OrderFixtureMixin, TestCase):
    def setUp(self):
        super().setUp()
        outro = Customer.objects.create(telefone="32321010", nome="Bruno Lima", endereco="Rua B, 2", zona=self.zona)
        self.janeiro = self._create(data_hora=timezone.make_aware(datetime(2024, 1, 15, 12, 0)))
        self.fevereiro = self._create(
            telefone_cliente=outro.telefone,
            turno=Order.TURNO_JANTAR,
            status=Order.STATUS_ENTREGUE,
            data_hora=timezone.make_aware(datetime(2024, 2, 10, 19, 30)),
        )

    def test_list_newest_first(self):
        self.assertEqual([o.id for o in list_orders()], [self.fevereiro.id, self.janeiro.id])

    def test_oldest_first(self):
        orders = list_orders_filtered(ordem="mais_antigos")
        self.assertEqual([o.id for o in orders], [self.janeiro.id, self.fevereiro.id])

    def test_filter_by_customer_name(self):
        self.assertEqual([o.id for o in list_orders_filtered(cliente="bruno")], [self.fevereiro.id])

    def test_filter_by_status_and_shift(self):
        self.assertEqual([o.id for o in list_orders_filtered(status=Order.STATUS_PENDENTE)], [self.janeiro.id])
        self.assertEqual([o.id for o in list_orders_filtered(turno=Order.TURNO_JANTAR)], [self.fevereiro.id])

    def test_filter_by_month(self):
        self.assertEqual([o.id for o in list_orders_filtered(mes=date(2024, 1, 1))], [self.janeiro.id])
        self.assertEqual(list_orders_filtered(mes=date(2024, 3, 1)), [])

    def test_invalid_order(self):
        with self.assertRaises(ValidationError):
            list_orders_filtered(ordem="aleatorio")


class TransactionFailureTest(OrderFixtureMixin, TestCase):
    def test_create_failure_writes_nothing(self):
        with patch("orders.utils._create_lines", side_effect=IntegrityError("boom")):
            with self.assertLogs("orders.utils", level="ERROR"):
                with self.assertRaises(TransactionError):
                    self._create()
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)

    def test_update_failure_keeps_previous_state(self):
        order = self._create()
        with patch("orders.utils._create_lines", side_effect=IntegrityError("boom")):
            with self.assertLogs("orders.utils", level="ERROR"):
                with self.assertRaises(TransactionError):
                    update_order(
                        order.id, status=Order.STATUS_ENTREGUE, itens=[{"codigo": "X2", "quantidade": 3}]
                    )
        order = get_order(order.id)
        self.assertEqual(order.status, Order.STATUS_PENDENTE)
        self.assertEqual([(linha.item_id, linha.quantidade) for linha in order.itens.all()], [("X1", 2)])

    def test_delete_failure_keeps_order(self):
        order = self._create()
        with patch("orders.utils.OrderItem.objects.using", side_effect=IntegrityError("boom")):
            with self.assertLogs("orders.utils", level="ERROR"):
                with self.assertRaises(TransactionError):
                    delete_order(order.id)
        self.assertTrue(Order.objects.filter(pk=order.id).exists())
        self.assertEqual(OrderItem.objects.filter(pedido_id=order.id).count(), 1)


class OrderNoteTest(OrderFixtureMixin, TestCase):
    def test_empty_note_is_stored_as_null(self):
        order = self._create(observacao="")
        self.assertIsNone(order.observacao)
        update_order(order.id, observacao="Portão azul")
        update_order(order.id, observacao="")
        self.assertIsNone(get_order(order.id).observacao)


class DeleteLastLineTest(OrderFixtureMixin, TestCase):
    def test_removing_lines_down_to_one(self):
        order = self._create(itens=[{"codigo": "X1", "quantidade": 1}, {"codigo": "X2", "quantidade": 1}])
        delete_order_item(order.id, "X1")
        with self.assertRaises(ValidationError):
            delete_order_item(order.id, "X2")
        self.assertEqual([linha.item_id for linha in list_order_items(order.id)], ["X2"])
