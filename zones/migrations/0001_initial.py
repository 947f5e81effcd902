import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Zone",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("bairro", models.CharField(max_length=100, verbose_name="Bairro")),
                (
                    "taxa",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=8,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Taxa de Entrega",
                    ),
                ),
            ],
            options={
                "ordering": ["bairro"],
                "verbose_name": "Zona",
                "verbose_name_plural": "Zonas",
            },
        ),
    ]
