# apps/react/middleware.py
from __future__ import annotations

import logging

from .environment import attach_environment, build_environment, release_environment

log = logging.getLogger("apps.react.middleware")


class ReactEnvironmentMiddleware:
    """
    Un environnement React neuf par requête.

    Le script agrégé de ``{% react_init_javascript %}`` couvre donc exactement les
    composants rendus pour cette réponse, jamais ceux d'une autre requête.
    Les TemplateResponse sont déjà rendues quand ``get_response`` rend la main.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        environment = attach_environment(request, build_environment())
        log.debug("React environment attached to %s", request.path)
        try:
            return self.get_response(request)
        finally:
            release_environment(environment)
