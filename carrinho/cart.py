"""
Order cart kept in memory while an order is being assembled.

A cart is an immutable value: every transition returns a new Cart and leaves
the one passed in untouched.
"""

from decimal import Decimal
from typing import NamedTuple

MIN_QUANTIDADE = 1
MAX_QUANTIDADE = 100


class CartLine(NamedTuple):
    codigo: str
    nome: str
    preco: Decimal
    quantidade: int = 1
    observacao: str = ""

    @property
    def total(self) -> Decimal:
        return self.preco * self.quantidade


class DeliveryDetails(NamedTuple):
    telefone: str = ""
    endereco: str = ""
    zona_id: int | None = None
    turno: str = ""
    forma_pagamento: str = "dinheiro"
    observacao: str = ""


class Cart(NamedTuple):
    linhas: tuple[CartLine, ...] = ()
    entrega: DeliveryDetails = DeliveryDetails()

    def get_line(self, codigo: str) -> CartLine | None:
        for linha in self.linhas:
            if linha.codigo == codigo:
                return linha
        return None


def coerce_quantity(value) -> int:
    """Anything that is not an integer between 1 and 100 becomes 1."""
    try:
        quantidade = int(value)
    except (TypeError, ValueError):
        return MIN_QUANTIDADE
    if quantidade < MIN_QUANTIDADE or quantidade > MAX_QUANTIDADE:
        return MIN_QUANTIDADE
    return quantidade


def add_item(cart: Cart, item) -> Cart:
    """
    Add one unit of a catalog item.

    Args:
        cart: current cart
        item: anything with `codigo`, `nome` and `preco` (a catalog Item)
    """
    if cart.get_line(item.codigo) is not None:
        linhas = tuple(
            linha._replace(quantidade=linha.quantidade + 1) if linha.codigo == item.codigo else linha
            for linha in cart.linhas
        )
    else:
        nova = CartLine(codigo=item.codigo, nome=item.nome, preco=Decimal(str(item.preco)))
        linhas = cart.linhas + (nova,)
    return cart._replace(linhas=linhas)


def remove_item(cart: Cart, codigo: str) -> Cart:
    return cart._replace(linhas=tuple(linha for linha in cart.linhas if linha.codigo != codigo))


def update_item(cart: Cart, codigo: str, quantidade=None, observacao: str | None = None) -> Cart:
    updates = {}
    if quantidade is not None:
        updates["quantidade"] = coerce_quantity(quantidade)
    if observacao is not None:
        updates["observacao"] = observacao
    if not updates:
        return cart
    return cart._replace(
        linhas=tuple(linha._replace(**updates) if linha.codigo == codigo else linha for linha in cart.linhas)
    )


def update_delivery(cart: Cart, **fields) -> Cart:
    return cart._replace(entrega=cart.entrega._replace(**fields))


def with_customer_defaults(cart: Cart, customer) -> Cart:
    """Use the customer's phone, and their address and zone where none was chosen yet."""
    entrega = cart.entrega
    return cart._replace(
        entrega=entrega._replace(
            telefone=customer.telefone,
            endereco=entrega.endereco or customer.endereco,
            zona_id=entrega.zona_id or customer.zona_id,
        )
    )


def cart_subtotal(cart: Cart) -> Decimal:
    return sum((linha.total for linha in cart.linhas), Decimal("0.00"))


def cart_delivery_fee(cart: Cart, zone_fees) -> Decimal:
    """
    Fee of the selected zone.

    Args:
        zone_fees: mapping of zone id to fee
    """
    if not cart.entrega.zona_id:
        return Decimal("0.00")
    return Decimal(str(zone_fees.get(cart.entrega.zona_id, "0.00")))


def cart_total(cart: Cart, zone_fees) -> Decimal:
    return cart_subtotal(cart) + cart_delivery_fee(cart, zone_fees)


def cart_totals(cart: Cart, zone_fees) -> dict:
    return {
        "subtotal": cart_subtotal(cart).quantize(Decimal("0.01")),
        "taxa_entrega": cart_delivery_fee(cart, zone_fees).quantize(Decimal("0.01")),
        "total": cart_total(cart, zone_fees).quantize(Decimal("0.01")),
    }


def cart_to_order_lines(cart: Cart) -> list[dict]:
    return [
        {"codigo": linha.codigo, "quantidade": linha.quantidade, "observacao": linha.observacao}
        for linha in cart.linhas
    ]


def cart_to_dict(cart: Cart) -> dict:
    """JSON-safe representation, used for session storage."""
    return {
        "linhas": [{**linha._asdict(), "preco": str(linha.preco)} for linha in cart.linhas],
        "entrega": cart.entrega._asdict(),
    }


def cart_from_dict(data: dict | None) -> Cart:
    if not data:
        return Cart()
    linhas = tuple(
        CartLine(
            codigo=linha["codigo"],
            nome=linha["nome"],
            preco=Decimal(linha["preco"]),
            quantidade=linha.get("quantidade", 1),
            observacao=linha.get("observacao", ""),
        )
        for linha in data.get("linhas", [])
    )
    entrega = DeliveryDetails(**data.get("entrega", {}))
    return Cart(linhas=linhas, entrega=entrega)
