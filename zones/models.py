from django.core.validators import MinValueValidator
from django.db import models


class Zone(models.Model):
    """Zona de entrega com taxa fixa"""

    bairro = models.CharField("Bairro", max_length=100)
    taxa = models.DecimalField("Taxa de Entrega", max_digits=8, decimal_places=2, validators=[MinValueValidator(0)])

    class Meta:
        ordering = ["bairro"]
        verbose_name = "Zona"
        verbose_name_plural = "Zonas"

    def __str__(self):
        return f"{self.bairro} (R$ {self.taxa})"
