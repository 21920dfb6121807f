from __future__ import annotations
from django.conf import settings
from django.core.checks import register, Warning, Error
from django.core.exceptions import ImproperlyConfigured

from .environment import get_environment_factory

MIDDLEWARE_PATH = "apps.react.middleware.ReactEnvironmentMiddleware"


@register()
def environment_factory_check(app_configs, **kwargs):
    try:
        factory = get_environment_factory()
    except ImproperlyConfigured as exc:
        return [Error(
            str(exc),
            hint="Pointe REACT_ENVIRONMENT_FACTORY vers un callable sans argument "
                 "(ex: apps.react.client.ClientOnlyEnvironment).",
            id="react.E001")]
    if not callable(factory):
        return [Error(
            f"REACT_ENVIRONMENT_FACTORY n'est pas callable: {factory!r}",
            id="react.E001")]
    return []


@register()
def middleware_installed_check(app_configs, **kwargs):
    # Pas bloquant: les vues sans tag React fonctionnent sans le middleware
    if MIDDLEWARE_PATH not in (getattr(settings, "MIDDLEWARE", None) or []):
        return [Warning(
            "ReactEnvironmentMiddleware absent de MIDDLEWARE.",
            hint=f"Ajoute '{MIDDLEWARE_PATH}' pour utiliser les tags {{% load react %}}.",
            id="react.W001")]
    return []


@register()
def routes_shape_check(app_configs, **kwargs):
    routes = getattr(settings, "REACT_ROUTES", None)
    if routes is None:
        return []
    if not isinstance(routes, dict):
        # ClientOnlyEnvironment itère routes.items() à chaque requête
        return [Error(
            f"REACT_ROUTES doit être un dict {{path: composant}}, reçu: {type(routes).__name__}.",
            id="react.E002")]
    warns = []
    for path, name in routes.items():
        if not isinstance(path, str) or not isinstance(name, str) or not name:
            warns.append(Warning(
                f"Route React invalide: {path!r} -> {name!r}",
                hint="Clef = chemin d'URL, valeur = nom de composant non vide.",
                id="react.W002"))
    return warns
