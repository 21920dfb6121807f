# apps/react/environment.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpRequest
from django.utils.module_loading import import_string

from .contracts import ReactEnvironment

log = logging.getLogger("apps.react.environment")

DEFAULT_FACTORY = "apps.react.client.ClientOnlyEnvironment"
REQUEST_ATTR = "react_environment"


def get_environment_factory() -> Callable[[], ReactEnvironment]:
    """Résout ``settings.REACT_ENVIRONMENT_FACTORY`` (pas de cache : relu à chaque appel)."""
    dotted = (getattr(settings, "REACT_ENVIRONMENT_FACTORY", "") or "").strip() or DEFAULT_FACTORY
    try:
        return import_string(dotted)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"REACT_ENVIRONMENT_FACTORY '{dotted}' n'est pas importable: {exc}"
        ) from exc


def build_environment() -> ReactEnvironment:
    factory = get_environment_factory()
    environment = factory()
    log.debug("React environment created: %s", type(environment).__name__)
    return environment


def attach_environment(request: HttpRequest, environment: ReactEnvironment) -> ReactEnvironment:
    setattr(request, REQUEST_ATTR, environment)
    return environment


def get_environment(request: Optional[HttpRequest]) -> ReactEnvironment:
    """
    Retourne l'environnement de la requête courante.

    Posé par ``ReactEnvironmentMiddleware`` ; sans lui, les tags React ne
    peuvent pas savoir quels composants appartiennent à la page.
    """
    if request is None:
        raise ImproperlyConfigured(
            "Les tags React exigent 'request' dans le contexte du template "
            "(context processor django.template.context_processors.request)."
        )
    environment = getattr(request, REQUEST_ATTR, None)
    if environment is None:
        raise ImproperlyConfigured(
            "Aucun environnement React sur la requête: ajoute "
            "'apps.react.middleware.ReactEnvironmentMiddleware' à MIDDLEWARE."
        )
    return environment


def release_environment(environment: ReactEnvironment) -> None:
    """Appelle le hook optionnel ``release()`` (retour d'un moteur au pool, etc.)."""
    release = getattr(environment, "release", None)
    if callable(release):
        release()
        log.debug("React environment released: %s", type(environment).__name__)
