"""
Zones seeder - creates delivery zones with their flat fees

This module is automatically discovered and executed by: python manage.py seed
"""

from decimal import Decimal

from zones.models import Zone

# Seeder priority (lower = runs first)
PRIORITY = 10

ZONES = [
    ("Centro", "5.00"),
    ("Jardim América", "7.00"),
    ("Vila Nova", "6.50"),
    ("Boa Vista", "8.00"),
    ("Santa Cruz", "10.00"),
    ("Retirada no balcão", "0.00"),
]


def seed():
    """Main seeding function for the zones app"""

    print("  Clearing existing zone data...")

    # Orders and customers reference zones with PROTECT
    from customer.models import Customer
    from orders.models import Order

    Order.objects.all().delete()
    Customer.objects.all().delete()
    Zone.objects.all().delete()
    print("  Zone database cleared")

    print(f"  Creating {len(ZONES)} zones...")
    Zone.objects.bulk_create([Zone(bairro=bairro, taxa=Decimal(taxa)) for bairro, taxa in ZONES])
    print("  Seeding complete!")
