from __future__ import annotations

from typing import Any, List, Optional, Tuple


class FakeComponent:
    def __init__(self, component_name: str, props: Any, container_id: Optional[str]):
        self.component_name = component_name
        self.props = props
        self.container_id = container_id or "auto0"
        self._tag = "div"
        self.tag_assignments: List[str] = []

    @property
    def container_tag(self) -> str:
        return self._tag

    @container_tag.setter
    def container_tag(self, value: str) -> None:
        self.tag_assignments.append(value)
        self._tag = value

    def render_html(self) -> str:
        return f'<{self._tag} id="{self.container_id}">{self.component_name}</{self._tag}>'

    def render_javascript(self) -> str:
        return f"init({self.component_name});"


class FakeEnvironment:
    """Environnement enregistreur : trace chaque appel reçu."""

    def __init__(self):
        self.created: List[FakeComponent] = []
        self.create_calls: List[Tuple[str, Any, Optional[str]]] = []
        self.route_calls: List[Tuple[str, Optional[str]]] = []
        self.released = False

    def create_component(self, component_name, props, container_id=None):
        self.create_calls.append((component_name, props, container_id))
        component = FakeComponent(component_name, props, container_id)
        self.created.append(component)
        return component

    def get_routed_html_for_url(self, url, container_id=None):
        self.route_calls.append((url, container_id))
        return f"<div data-route=\"{url}\"></div>"

    def get_init_javascript(self) -> str:
        return "ALL_INIT();"

    def release(self) -> None:
        self.released = True


def build_fake_environment() -> FakeEnvironment:
    return FakeEnvironment()
