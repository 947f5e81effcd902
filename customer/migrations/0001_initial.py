import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("zones", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "telefone",
                    models.CharField(max_length=9, primary_key=True, serialize=False, verbose_name="Telefone"),
                ),
                ("nome", models.CharField(max_length=150, verbose_name="Nome")),
                ("cpf", models.CharField(blank=True, max_length=11, null=True, verbose_name="CPF")),
                ("endereco", models.TextField(verbose_name="Endereço")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "zona",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="clientes",
                        to="zones.zone",
                        verbose_name="Zona",
                    ),
                ),
            ],
            options={
                "ordering": ["nome"],
                "verbose_name": "Cliente",
                "verbose_name_plural": "Clientes",
            },
        ),
    ]
