from django.db import models


class ConfigVariable(models.Model):
    """Named configuration value. Shared secrets are stored here too."""

    nome = models.CharField("Nome", max_length=100, primary_key=True)
    valor = models.TextField("Valor")

    class Meta:
        ordering = ["nome"]
        verbose_name = "Variável de Configuração"
        verbose_name_plural = "Variáveis de Configuração"

    def __str__(self):
        return self.nome
