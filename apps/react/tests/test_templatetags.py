from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured
from django.template import Context, Template
from django.test import RequestFactory, SimpleTestCase

from .fakes import FakeEnvironment


class ReactTemplateTagsTests(SimpleTestCase):
    factory = RequestFactory()

    def _render(self, source: str, path: str = "/", **ctx) -> str:
        request = self.factory.get(path)
        request.react_environment = self.env
        tpl = Template("{% load react %}" + source)
        return tpl.render(Context({"request": request, **ctx}))

    def setUp(self) -> None:
        self.env = FakeEnvironment()

    def test_react_component_forwards_arguments(self) -> None:
        rendered = self._render(
            '{% react_component "Greeter" props container_id="greet1" %}',
            props={"name": "Ada"},
        )
        self.assertEqual(rendered, '<div id="greet1">Greeter</div>')
        self.assertEqual(self.env.create_calls, [("Greeter", {"name": "Ada"}, "greet1")])

    def test_react_component_html_tag(self) -> None:
        rendered = self._render('{% react_component "Greeter" props html_tag="span" container_id="g" %}', props={})
        self.assertEqual(rendered, '<span id="g">Greeter</span>')

    def test_react_component_output_not_autoescaped(self) -> None:
        rendered = self._render('{% react_component "Greeter" props %}', props={})
        self.assertNotIn("&lt;", rendered)

    def test_react_router_uses_request_path(self) -> None:
        rendered = self._render("{% react_router %}", path="/about/")
        self.assertEqual(rendered, '<div data-route="/about/"></div>')
        self.assertEqual(self.env.route_calls, [("/about/", None)])

    def test_react_router_explicit_url(self) -> None:
        self._render('{% react_router props url="/blog/" container_id="app" %}', path="/about/", props={})
        self.assertEqual(self.env.route_calls, [("/blog/", "app")])

    def test_react_with_init(self) -> None:
        rendered = self._render('{% react_with_init "Greeter" props container_id="g" %}', props={})
        self.assertEqual(rendered, '<div id="g">Greeter</div>\n<script>init(Greeter);</script>')

    def test_react_init_javascript(self) -> None:
        rendered = self._render(
            '{% react_component "A" props %}{% react_component "B" props %}{% react_init_javascript %}',
            props={},
        )
        self.assertTrue(rendered.endswith("<script>ALL_INIT();</script>"))
        self.assertEqual([c[0] for c in self.env.create_calls], ["A", "B"])

    def test_missing_middleware_raises(self) -> None:
        request = self.factory.get("/")
        tpl = Template('{% load react %}{% react_component "A" props %}')
        with self.assertRaises(ImproperlyConfigured):
            tpl.render(Context({"request": request, "props": {}}))

    def test_missing_request_raises(self) -> None:
        tpl = Template("{% load react %}{% react_init_javascript %}")
        with self.assertRaises(ImproperlyConfigured):
            tpl.render(Context({}))
