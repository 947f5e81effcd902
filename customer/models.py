from django.db import models


class Customer(models.Model):
    # Local number without area code, digits only
    telefone = models.CharField("Telefone", max_length=9, primary_key=True)
    nome = models.CharField("Nome", max_length=150)
    cpf = models.CharField("CPF", max_length=11, blank=True, null=True)

    # Default delivery information
    endereco = models.TextField("Endereço")
    zona = models.ForeignKey("zones.Zone", on_delete=models.PROTECT, related_name="clientes", verbose_name="Zona")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["nome"]
        verbose_name = "Cliente"
        verbose_name_plural = "Clientes"

    def __str__(self):
        return f"{self.nome} ({self.telefone})"
