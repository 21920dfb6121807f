# apps/pages/views.py
from __future__ import annotations

from django.views.generic import TemplateView


class HomeView(TemplateView):
    """
    Page d'accueil : composants rendus via {% react_component %}, puis un seul
    {% react_init_javascript %} en bas de page pour les monter côté client.
    """
    template_name = "pages/home.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["greeter_props"] = {"name": self.request.GET.get("name") or "Ada"}
        ctx["comments_props"] = {"comments": [], "pollInterval": 2000}
        return ctx


class AboutView(TemplateView):
    """Page rendue par la table de routes React (REACT_ROUTES)."""
    template_name = "pages/about.html"


class GreeterPartialView(TemplateView):
    """Vue partielle autonome : HTML + script d'init du seul composant (fetch/AJAX)."""
    template_name = "pages/_greeter_partial.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["greeter_props"] = {"name": self.request.GET.get("name") or "Ada"}
        return ctx
