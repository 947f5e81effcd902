import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Item",
            fields=[
                (
                    "codigo",
                    models.CharField(max_length=20, primary_key=True, serialize=False, verbose_name="Código do Item"),
                ),
                ("nome", models.CharField(max_length=200, verbose_name="Nome do Item")),
                (
                    "preco",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0.01)],
                        verbose_name="Preço",
                    ),
                ),
            ],
            options={
                "ordering": ["codigo"],
                "verbose_name": "Item do Cardápio",
                "verbose_name_plural": "Itens do Cardápio",
            },
        ),
    ]
