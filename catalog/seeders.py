"""
Catalog seeder - creates the menu items

This module is automatically discovered and executed by: python manage.py seed
"""

from decimal import Decimal

from catalog.models import Item

# Seeder priority (lower = runs first)
PRIORITY = 20

ITEMS = [
    ("M01", "Marmita pequena", "18.00"),
    ("M02", "Marmita média", "22.00"),
    ("M03", "Marmita grande", "26.00"),
    ("F01", "Feijoada completa", "32.00"),
    ("P01", "Pastel de carne", "8.50"),
    ("P02", "Pastel de queijo", "8.00"),
    ("S01", "Salada da casa", "14.00"),
    ("B01", "Refrigerante lata", "6.00"),
    ("B02", "Suco natural", "9.00"),
    ("B03", "Água mineral", "3.50"),
    ("D01", "Pudim", "7.00"),
]


def seed():
    """Main seeding function for the catalog app"""

    print("  Clearing existing catalog data...")

    # Order lines reference items with PROTECT
    from orders.models import Order

    Order.objects.all().delete()
    Item.objects.all().delete()
    print("  Catalog database cleared")

    print(f"  Creating {len(ITEMS)} items...")
    Item.objects.bulk_create([Item(codigo=codigo, nome=nome, preco=Decimal(preco)) for codigo, nome, preco in ITEMS])
    print("  Seeding complete!")
