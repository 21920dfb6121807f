# apps/react/contracts.py
"""
Contrats structurels de l'environnement de rendu React.

Le moteur réel (exécution JS côté serveur, pool de moteurs, bundles) vit hors
de cette app : tout objet qui respecte ces protocoles peut être branché via
``settings.REACT_ENVIRONMENT_FACTORY``.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

__all__ = ["ReactComponent", "ReactEnvironment"]


@runtime_checkable
class ReactComponent(Protocol):
    """Handle d'une instance de composant créée par l'environnement."""

    component_name: str
    props: Any
    container_id: str
    container_tag: str

    def render_html(self) -> str:
        ...

    def render_javascript(self) -> str:
        ...


@runtime_checkable
class ReactEnvironment(Protocol):
    """
    Environnement de rendu.

    L'environnement garde la trace des composants créés : ``get_init_javascript``
    couvre tous ceux créés depuis sa construction (une requête, via le middleware).
    """

    def create_component(
        self,
        component_name: str,
        props: Any,
        container_id: Optional[str] = None,
    ) -> ReactComponent:
        ...

    def get_routed_html_for_url(self, url: str, container_id: Optional[str] = None) -> str:
        ...

    def get_init_javascript(self) -> str:
        ...
