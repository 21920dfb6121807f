"""
Tags de rendu React.

Usage :
    {% load react %}
    {% react_component "Greeter" props container_id="greet1" %}
    {% react_router props %}
    {% react_init_javascript %}
"""
from __future__ import annotations

from typing import Any, Optional

from django import template

from apps.react.environment import get_environment
from apps.react.helpers import ReactHelpers

register = template.Library()


def _helpers(context) -> ReactHelpers:
    return ReactHelpers(get_environment(context.get("request")))


@register.simple_tag(takes_context=True)
def react_component(
    context,
    component_name: str,
    props: Any = None,
    html_tag: Optional[str] = None,
    container_id: Optional[str] = None,
):
    """Rend le HTML du composant ; son init JS part dans {% react_init_javascript %}."""
    return _helpers(context).render(component_name, props, html_tag=html_tag, container_id=container_id)


@register.simple_tag(takes_context=True)
def react_router(
    context,
    props: Any = None,
    url: Optional[str] = None,
    html_tag: Optional[str] = None,
    container_id: Optional[str] = None,
):
    """Rend la route React de ``url`` (par défaut : chemin de la requête courante)."""
    request = context.get("request")
    return _helpers(context).render_router(
        props,
        url=url,
        html_tag=html_tag,
        container_id=container_id,
        request_path=request.path,
    )


@register.simple_tag(takes_context=True)
def react_with_init(
    context,
    component_name: str,
    props: Any = None,
    html_tag: Optional[str] = None,
    container_id: Optional[str] = None,
):
    return _helpers(context).render_with_init(component_name, props, html_tag=html_tag, container_id=container_id)


@register.simple_tag(takes_context=True)
def react_init_javascript(context):
    return _helpers(context).render_init_script()
