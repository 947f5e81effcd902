"""
Customer seeder - creates sample customers spread over the delivery zones

This module is automatically discovered and executed by: python manage.py seed
"""

import random

from customer.models import Customer
from zones.models import Zone

# Seeder priority (lower = runs first)
PRIORITY = 30

NUM_CUSTOMERS = 20

FIRST_NAMES = ["Ana", "Bruno", "Carla", "Diego", "Eduarda", "Felipe", "Gabriela", "Henrique", "Isabela", "João"]
LAST_NAMES = ["Silva", "Souza", "Oliveira", "Santos", "Lima", "Pereira", "Costa", "Almeida", "Ferreira", "Rodrigues"]
STREET_TYPES = ["Rua", "Avenida", "Travessa", "Alameda"]
STREET_NAMES = ["das Flores", "Brasil", "São João", "XV de Novembro", "Santos Dumont", "Tiradentes", "da Paz"]


def seed():
    """Main seeding function for the customer app"""

    # Set random seed for reproducibility
    random.seed(42)

    print("  Clearing existing customer data...")
    from orders.models import Order

    Order.objects.all().delete()
    Customer.objects.all().delete()
    print("  Customer database cleared")

    zones = list(Zone.objects.all())
    if not zones:
        print("  ⚠️  No zones found!")
        print("  Please run zones seeder first")
        return

    print(f"  Creating {NUM_CUSTOMERS} customers...")
    customers = []
    used_phones = set()
    while len(customers) < NUM_CUSTOMERS:
        telefone = f"9{random.randint(10000000, 99999999)}"
        if telefone in used_phones:
            continue
        used_phones.add(telefone)

        nome = f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}"
        endereco = f"{random.choice(STREET_TYPES)} {random.choice(STREET_NAMES)}, {random.randint(1, 900)}"
        cpf = "".join(str(random.randint(0, 9)) for _ in range(11)) if random.random() > 0.5 else None

        customers.append(
            Customer(telefone=telefone, nome=nome, cpf=cpf, endereco=endereco, zona=random.choice(zones))
        )

    Customer.objects.bulk_create(customers)
    print(f"  Created {len(customers)} customers")
    print("  Seeding complete!")
