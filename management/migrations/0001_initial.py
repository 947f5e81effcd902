from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ConfigVariable",
            fields=[
                ("nome", models.CharField(max_length=100, primary_key=True, serialize=False, verbose_name="Nome")),
                ("valor", models.TextField(verbose_name="Valor")),
            ],
            options={
                "ordering": ["nome"],
                "verbose_name": "Variável de Configuração",
                "verbose_name_plural": "Variáveis de Configuração",
            },
        ),
    ]
