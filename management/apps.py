import logging
import os
import sys
import threading

from django.apps import AppConfig
from django.db import DatabaseError

logger = logging.getLogger(__name__)


class ManagementConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "management"
    verbose_name = "Configuração"

    # Class variable to track if initialization has occurred in this process
    _initialized = False
    _lock = threading.Lock()

    def ready(self):
        # Only run during actual server startup (runserver or WSGI)
        if self._should_initialize():
            with self._lock:
                if not ManagementConfig._initialized:
                    self._store_initial_secrets()
                    ManagementConfig._initialized = True

    def _should_initialize(self):
        """Determine if we should run initialization."""
        if len(sys.argv) == 0 or "wsgi" in " ".join(sys.argv):
            return True

        # runserver: only in the reloaded process
        if len(sys.argv) >= 2 and sys.argv[1] == "runserver":
            return os.environ.get("RUN_MAIN") == "true"

        return False

    def _store_initial_secrets(self):
        from gestao_pedidos.env import getEnvConfig

        from .utils import set_variable

        secrets = getEnvConfig().get_initial_secrets()
        try:
            for nome, valor in secrets.items():
                set_variable(nome, valor)
        except DatabaseError:
            logger.warning("Could not store shared secrets; run `manage.py migrate` first")
            return
        if secrets:
            logger.info("Stored shared secrets: %s", ", ".join(sorted(secrets)))
