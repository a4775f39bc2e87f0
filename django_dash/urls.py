from django.urls import path

from . import views

app_name = "django_dash"

urlpatterns = [
    path("block/<int:pk>/", views.block_view, name="block"),
    path("block/<int:pk>/preferences/", views.preferences_view, name="preferences"),
]
