from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured
from django.test import RequestFactory, SimpleTestCase, override_settings

from apps.react import environment
from apps.react.client import ClientOnlyEnvironment

from .fakes import FakeEnvironment


class BuildEnvironmentTests(SimpleTestCase):
    def test_default_factory(self) -> None:
        self.assertIsInstance(environment.build_environment(), ClientOnlyEnvironment)

    @override_settings(REACT_ENVIRONMENT_FACTORY="")
    def test_blank_setting_falls_back_to_client_environment(self) -> None:
        self.assertIsInstance(environment.build_environment(), ClientOnlyEnvironment)

    def test_factory_is_resolved_on_every_call(self) -> None:
        with override_settings(REACT_ENVIRONMENT_FACTORY="apps.react.tests.fakes.FakeEnvironment"):
            self.assertIsInstance(environment.build_environment(), FakeEnvironment)
        self.assertIsInstance(environment.build_environment(), ClientOnlyEnvironment)

    @override_settings(REACT_ENVIRONMENT_FACTORY="apps.react.nope.Missing")
    def test_unimportable_factory(self) -> None:
        with self.assertRaises(ImproperlyConfigured):
            environment.build_environment()


class GetEnvironmentTests(SimpleTestCase):
    factory = RequestFactory()

    def test_returns_attached_environment(self) -> None:
        request = self.factory.get("/")
        env = FakeEnvironment()
        environment.attach_environment(request, env)
        self.assertIs(environment.get_environment(request), env)

    def test_missing_attribute(self) -> None:
        with self.assertRaises(ImproperlyConfigured):
            environment.get_environment(self.factory.get("/"))

    def test_missing_request(self) -> None:
        with self.assertRaises(ImproperlyConfigured):
            environment.get_environment(None)

    def test_release_is_optional(self) -> None:
        environment.release_environment(object())
        env = FakeEnvironment()
        environment.release_environment(env)
        self.assertTrue(env.released)
