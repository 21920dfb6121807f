# apps/react/client.py
"""
Environnement React « client-only ».

Pas de moteur JS côté serveur : le HTML rendu est un conteneur vide et le
composant est monté par ``ReactDOM.render`` dans le navigateur. C'est
l'environnement par défaut ; un environnement avec rendu serveur se branche
via ``settings.REACT_ENVIRONMENT_FACTORY``.
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional, Set

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import format_html

__all__ = ["ClientComponent", "ClientOnlyEnvironment", "RouteNotFound", "serialize_props"]

# Nom JS autorisé: identifiant éventuellement pointé (Components.Header)
_COMPONENT_NAME_RE = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")

# Un JSON injecté dans <script> ne doit jamais pouvoir fermer la balise
_JSON_SCRIPT_ESCAPES = {
    ord(">"): "\\u003E",
    ord("<"): "\\u003C",
    ord("&"): "\\u0026",
}


class RouteNotFound(KeyError):
    """Aucune route React ne correspond à l'URL demandée."""

    def __init__(self, url: str):
        super().__init__(url)
        self.url = url

    def __str__(self) -> str:  # pragma: no cover - string repr helper
        return f"No React route matches '{self.url}'."


def serialize_props(props: Any) -> str:
    """JSON des props, échappé pour être injecté tel quel dans un élément <script>."""
    return json.dumps(props, cls=DjangoJSONEncoder).translate(_JSON_SCRIPT_ESCAPES)


def _route_key(url: str) -> str:
    if url is None:
        raise TypeError("URL de route React manquante (None).")
    path = url.split("?", 1)[0].split("#", 1)[0].strip()
    return path.rstrip("/") or "/"


class ClientComponent:
    def __init__(self, component_name: str, props: Any, container_id: str, container_tag: str):
        if not _COMPONENT_NAME_RE.match(component_name or ""):
            raise ValueError(f"Nom de composant React invalide: {component_name!r}")
        self.component_name = component_name
        self.props = props
        self.container_id = container_id
        self.container_tag = container_tag

    def render_html(self) -> str:
        return str(format_html(
            "<{tag} id=\"{id}\"></{tag}>",
            tag=self.container_tag,
            id=self.container_id,
        ))

    def render_javascript(self) -> str:
        container_id = json.dumps(self.container_id).translate(_JSON_SCRIPT_ESCAPES)
        return (
            f"ReactDOM.render(React.createElement({self.component_name}, "
            f"{serialize_props(self.props)}), document.getElementById({container_id}))"
        )

    def __repr__(self) -> str:
        return f"<ClientComponent {self.component_name}#{self.container_id}>"


class ClientOnlyEnvironment:
    """
    Garde la liste des composants créés (ordre de création) pour produire le
    script d'initialisation agrégé. Une instance par requête (middleware).
    """

    def __init__(
        self,
        *,
        container_tag: Optional[str] = None,
        id_prefix: Optional[str] = None,
        routes: Optional[Dict[str, str]] = None,
    ):
        self.container_tag = container_tag or getattr(settings, "REACT_CONTAINER_TAG", "div") or "div"
        self.id_prefix = id_prefix if id_prefix is not None else getattr(settings, "REACT_CONTAINER_ID_PREFIX", "react_")
        raw_routes = routes if routes is not None else (getattr(settings, "REACT_ROUTES", None) or {})
        self.routes = {_route_key(path): name for path, name in raw_routes.items()}
        self.components: List[ClientComponent] = []
        self._used_ids: Set[str] = set()
        self._counter = 0

    def _next_container_id(self) -> str:
        # saute les ids déjà pris (y compris ceux fournis par l'appelant)
        while True:
            candidate = f"{self.id_prefix}{self._counter}"
            self._counter += 1
            if candidate not in self._used_ids:
                return candidate

    def create_component(
        self,
        component_name: str,
        props: Any,
        container_id: Optional[str] = None,
    ) -> ClientComponent:
        component = ClientComponent(
            component_name,
            props,
            container_id or self._next_container_id(),
            self.container_tag,
        )
        self.components.append(component)
        self._used_ids.add(component.container_id)
        return component

    def get_routed_html_for_url(self, url: str, container_id: Optional[str] = None) -> str:
        name = self.routes.get(_route_key(url))
        if not name:
            raise RouteNotFound(url)
        return self.create_component(name, {"location": url}, container_id).render_html()

    def get_init_javascript(self) -> str:
        return "\n".join(component.render_javascript() for component in self.components)

    def release(self) -> None:
        self.components.clear()
        self._used_ids.clear()
        self._counter = 0
