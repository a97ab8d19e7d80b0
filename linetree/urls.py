from django.urls import path

from linetree import views

urlpatterns = [
    path("", views.home, name="home"),
    path("explore/", views.explore, name="explore"),
    path("share/", views.share, name="share"),
]
