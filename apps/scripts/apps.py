# apps/scripts/apps.py
from pathlib import Path

from django.apps import AppConfig
import logging

log = logging.getLogger("apps.scripts.apps")


class ScriptsConfig(AppConfig):
    name = "apps.scripts"
    label = "scripts"
    verbose_name = "Scripts"
    # package namespace: chemin explicite
    path = str(Path(__file__).resolve().parent)

    def ready(self):
        from . import checks  # noqa: F401  (enregistre les system checks)
        from .config.loader import lookup_dirs

        log.info("ScriptsConfig ready: %d lookup dir(s).", len(lookup_dirs()))
