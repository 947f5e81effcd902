"""
Orders seeder - creates sample orders for existing customers

This module is automatically discovered and executed by: python manage.py seed

IMPORTANT: Run after zones, catalog and customer seeders (uses existing customers and items)
"""

import random
from datetime import timedelta

from django.utils import timezone

from catalog.models import Item
from customer.models import Customer
from orders.models import Order
from orders.utils import create_order

# Seeder priority (lower = runs first)
PRIORITY = 40

MIN_ORDERS_PER_CUSTOMER = 1
MAX_ORDERS_PER_CUSTOMER = 4
HISTORY_DAYS = 90


def seed():
    """Main seeding function for the orders app"""

    random.seed(42)

    print("  Clearing existing order data...")
    Order.objects.all().delete()
    print("  Order database cleared")

    customers = list(Customer.objects.all())
    if not customers:
        print("  ⚠️  No customers found!")
        print("  Please run customer seeder first")
        return

    codigos = list(Item.objects.values_list("codigo", flat=True))
    if not codigos:
        print("  ⚠️  No items found!")
        print("  Please run catalog seeder first")
        return

    print(f"  Found {len(customers)} customers and {len(codigos)} items")

    status_weights = [
        (Order.STATUS_ENTREGUE, 0.7),
        (Order.STATUS_PENDENTE, 0.2),
        (Order.STATUS_CANCELADO, 0.1),
    ]
    now = timezone.now()
    created = 0

    for customer in customers:
        for _ in range(random.randint(MIN_ORDERS_PER_CUSTOMER, MAX_ORDERS_PER_CUSTOMER)):
            status = random.choices([s[0] for s in status_weights], weights=[s[1] for s in status_weights])[0]
            linhas = [
                {"codigo": codigo, "quantidade": random.randint(1, 3)}
                for codigo in random.sample(codigos, random.randint(1, min(4, len(codigos))))
            ]
            create_order(
                telefone_cliente=customer.telefone,
                endereco=customer.endereco,
                zona_id=customer.zona_id,
                turno=random.choice([Order.TURNO_ALMOCO, Order.TURNO_JANTAR]),
                itens=linhas,
                forma_pagamento=random.choice(["dinheiro", "pix", "cartao"]),
                status=status,
                data_hora=now - timedelta(days=random.randint(0, HISTORY_DAYS), minutes=random.randint(0, 600)),
            )
            created += 1

    print(f"  Created {created} orders")
    print("  Seeding complete!")
