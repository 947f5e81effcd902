from django.core.validators import MinValueValidator
from django.db import models


class Item(models.Model):
    """Item do cardápio"""

    codigo = models.CharField("Código do Item", max_length=20, primary_key=True)
    nome = models.CharField("Nome do Item", max_length=200)
    preco = models.DecimalField(
        "Preço",
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0.01)],
    )

    class Meta:
        ordering = ["codigo"]
        verbose_name = "Item do Cardápio"
        verbose_name_plural = "Itens do Cardápio"

    def __str__(self):
        return f"{self.codigo} - {self.nome}"
