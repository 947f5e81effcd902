"""
Management seeder - creates the default config variables

This module is automatically discovered and executed by: python manage.py seed
"""

from gestao_pedidos.env import getEnvConfig
from management.models import ConfigVariable

# Seeder priority (lower = runs first)
PRIORITY = 50

DEFAULT_VARIABLES = {
    "nomeEstabelecimento": "Restaurante Exemplo",
    "horarioAlmoco": "11:00-14:30",
    "horarioJantar": "18:00-22:30",
}

# Development-only secrets, replaced by ADMIN_SECRET / BASIC_SECRET when set
DEV_SECRETS = {
    "senhaAdmin": "admin123",
    "senhaBasic": "1234",
}


def seed():
    """Main seeding function for the management app"""

    print("  Clearing existing config variables...")
    ConfigVariable.objects.all().delete()
    print("  Config variables cleared")

    variables = {**DEFAULT_VARIABLES, **DEV_SECRETS, **getEnvConfig().get_initial_secrets()}
    ConfigVariable.objects.bulk_create([ConfigVariable(nome=nome, valor=valor) for nome, valor in variables.items()])
    print(f"  Created {len(variables)} config variables")
    print("  Seeding complete!")
