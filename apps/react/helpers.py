# apps/react/helpers.py
"""Helpers de vue pour intégrer des composants React dans une page rendue côté serveur."""
from __future__ import annotations

from typing import Any, Optional

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .contracts import ReactEnvironment

__all__ = ["ReactHelpers", "script_tag"]


def script_tag(script: str) -> SafeString:
    """Enveloppe du JavaScript (déjà sûr, produit par l'environnement) dans <script>."""
    return format_html("<script>{}</script>", mark_safe(script))


class ReactHelpers:
    """
    Façade sans état au-dessus d'un environnement React.

    Aucune validation ni reprise ici : les erreurs de l'environnement remontent
    telles quelles au template.
    """

    def __init__(self, environment: ReactEnvironment):
        self.environment = environment

    def _create(self, component_name: str, props: Any, html_tag: Optional[str], container_id: Optional[str]):
        component = self.environment.create_component(component_name, props, container_id)
        if html_tag:
            component.container_tag = html_tag
        return component

    def render(
        self,
        component_name: str,
        props: Any,
        html_tag: Optional[str] = None,
        container_id: Optional[str] = None,
    ) -> SafeString:
        """Rend le HTML du composant ``component_name`` initialisé avec ``props``.

        ``html_tag`` remplace la balise conteneur par défaut de l'environnement
        (``div``) ; ``container_id`` est auto-généré par l'environnement si absent.
        """
        component = self._create(component_name, props, html_tag, container_id)
        return mark_safe(component.render_html())

    def render_router(
        self,
        props: Any = None,
        url: Optional[str] = None,
        html_tag: Optional[str] = None,
        container_id: Optional[str] = None,
        *,
        request_path: Optional[str] = None,
    ) -> SafeString:
        """Rend le HTML de la route correspondant à ``url``.

        Sans ``url``, on utilise ``request_path`` fourni par l'appelant (le
        chemin de la requête courante). ``props`` et ``html_tag`` ne sont pas
        transmis : la table de routes de l'environnement décide du composant.
        Ni l'un ni l'autre : TypeError.
        """
        if url is None:
            url = request_path
        if url is None:
            raise TypeError("render_router exige `url` ou `request_path`.")
        return mark_safe(self.environment.get_routed_html_for_url(url, container_id))

    def render_with_init(
        self,
        component_name: str,
        props: Any,
        html_tag: Optional[str] = None,
        container_id: Optional[str] = None,
    ) -> SafeString:
        """
        Comme ``render``, suivi du script d'initialisation de CE composant.
        Utile pour les vues partielles autonomes.
        """
        component = self._create(component_name, props, html_tag, container_id)
        html = component.render_html()
        script = script_tag(component.render_javascript())
        return mark_safe(html + "\n" + script)

    def render_init_script(self) -> SafeString:
        """Script d'initialisation client de tous les composants rendus par l'environnement."""
        return script_tag(self.environment.get_init_javascript())
