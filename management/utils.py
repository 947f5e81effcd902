import logging

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction

from gestao_pedidos.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError

from .models import ConfigVariable

logger = logging.getLogger(__name__)

VARIABLE_NOT_FOUND = "Variável não encontrada"

# Secret type accepted by check_secret -> variable holding it
SECRET_VARIABLES = {
    "basic": "senhaBasic",
    "admin": "senhaAdmin",
}


def get_variable(nome, using=DEFAULT_DB_ALIAS):
    try:
        return ConfigVariable.objects.using(using).get(pk=nome)
    except ConfigVariable.DoesNotExist:
        raise NotFoundError(VARIABLE_NOT_FOUND)


def list_variables(using=DEFAULT_DB_ALIAS):
    return list(ConfigVariable.objects.using(using).all())


def create_variable(nome, valor, using=DEFAULT_DB_ALIAS):
    try:
        with transaction.atomic(using=using):
            variable = ConfigVariable.objects.using(using).create(nome=nome, valor=valor)
    except IntegrityError:
        raise ConflictError(f"Variável {nome} já existe")
    logger.info("Config variable %s created", nome)
    return variable


def update_variable(nome, valor, using=DEFAULT_DB_ALIAS):
    variable = get_variable(nome, using=using)
    variable.valor = valor
    variable.save(using=using, update_fields=["valor"])
    return variable


def set_variable(nome, valor, using=DEFAULT_DB_ALIAS):
    """Create or overwrite a variable."""
    variable, _ = ConfigVariable.objects.using(using).update_or_create(nome=nome, defaults={"valor": valor})
    return variable


def delete_variable(nome, using=DEFAULT_DB_ALIAS):
    variable = get_variable(nome, using=using)
    snapshot = {"nome": variable.nome, "valor": variable.valor}
    variable.delete(using=using)
    logger.info("Config variable %s deleted", nome)
    return snapshot


def check_secret(tipo, senha, using=DEFAULT_DB_ALIAS):
    """
    Compare a password against the stored shared secret of the given type.

    Args:
        tipo: 'basic' or 'admin'
        senha: password typed by the user

    Returns:
        {"success": True, "tipo": tipo} when the password matches

    Raises:
        ValidationError: unknown type
        NotFoundError: no secret stored for that type
        UnauthorizedError: password does not match
    """
    nome = SECRET_VARIABLES.get(tipo)
    if nome is None:
        raise ValidationError("Tipo de senha inválido. Use 'basic' ou 'admin'.")

    try:
        stored = ConfigVariable.objects.using(using).get(pk=nome)
    except ConfigVariable.DoesNotExist:
        raise NotFoundError(f"Senha {tipo} não configurada")

    if senha != stored.valor:
        logger.warning("Failed %s secret check", tipo)
        raise UnauthorizedError()

    return {"success": True, "tipo": tipo}
