# apps/react/apps.py
from django.apps import AppConfig
import logging

log = logging.getLogger("apps.react.apps")


class ReactConfig(AppConfig):
    name = "apps.react"
    label = "react"
    verbose_name = "React"

    def ready(self):
        # Enregistre les system checks
        from . import checks  # noqa: F401
        from django.conf import settings

        log.info(
            "ReactConfig ready: environment factory=%s",
            getattr(settings, "REACT_ENVIRONMENT_FACTORY", None),
        )
