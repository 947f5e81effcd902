import os
from typing import NamedTuple

from dotenv import load_dotenv

load_dotenv()

DEV_SECRET_KEY = "django-insecure-gestao-pedidos-dev-key"


class EnvConfig(NamedTuple):
    DJANGO_DEBUG: bool
    DJANGO_SECRET_KEY: str
    ALLOWED_HOSTS: list[str]
    USE_POSTGRES: bool
    POSTGRES_HOST: str
    POSTGRES_PORT: str
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str
    TIME_ZONE: str
    LOG_LEVEL: str
    # Shared secrets stored as config variables on start-up
    ADMIN_SECRET: str
    BASIC_SECRET: str

    def get_initial_secrets(self) -> dict[str, str]:
        """
        Config variables to store when the server starts.
        Secrets left empty in the environment are not touched.
        """
        secrets = {"senhaAdmin": self.ADMIN_SECRET, "senhaBasic": self.BASIC_SECRET}
        return {nome: valor for nome, valor in secrets.items() if valor}


envConfig: EnvConfig | None = None


def getFromEnv(name: str, optional=False) -> str:
    var = os.getenv(name)

    if not optional and var is None:
        raise ValueError(f"The environment variable `${name}` is empty.")

    return var if var is not None else ""


def getBoolFromEnv(name: str) -> bool:
    return getFromEnv(name, True).strip() != ""


def getListFromEnv(name: str, default: list[str] | None = None) -> list[str]:
    value = getFromEnv(name, True)
    if not value and default is not None:
        return default
    return [host.strip() for host in value.split(",") if host.strip()]


def getEnvConfig() -> EnvConfig:
    global envConfig

    if envConfig is not None:
        return envConfig

    use_postgres = getBoolFromEnv("USE_POSTGRES")

    envConfig = EnvConfig(
        DJANGO_DEBUG=getBoolFromEnv("DJANGO_DEBUG"),
        DJANGO_SECRET_KEY=getFromEnv("DJANGO_SECRET_KEY", optional=True) or DEV_SECRET_KEY,
        ALLOWED_HOSTS=getListFromEnv("ALLOWED_HOSTS", ["localhost", "127.0.0.1", "testserver"]),
        USE_POSTGRES=use_postgres,
        POSTGRES_HOST=getFromEnv("POSTGRES_HOST", not use_postgres),
        POSTGRES_PORT=getFromEnv("POSTGRES_PORT", not use_postgres),
        POSTGRES_USER=getFromEnv("POSTGRES_USER", not use_postgres),
        POSTGRES_PASSWORD=getFromEnv("POSTGRES_PASSWORD", not use_postgres),
        POSTGRES_DB=getFromEnv("POSTGRES_DB", not use_postgres),
        TIME_ZONE=getFromEnv("TIME_ZONE", optional=True) or "America/Sao_Paulo",
        LOG_LEVEL=(getFromEnv("LOG_LEVEL", optional=True) or "INFO").upper(),
        ADMIN_SECRET=getFromEnv("ADMIN_SECRET", optional=True),
        BASIC_SECRET=getFromEnv("BASIC_SECRET", optional=True),
    )

    return envConfig
