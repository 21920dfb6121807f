from django.urls import path

from .views import AboutView, GreeterPartialView, HomeView

app_name = "pages"
urlpatterns = [
    path("", HomeView.as_view(), name="home"),
    path("about/", AboutView.as_view(), name="about"),
    path("partials/greeter/", GreeterPartialView.as_view(), name="greeter-partial"),
]
