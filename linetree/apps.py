from django.apps import AppConfig


class LinetreeConfig(AppConfig):
    name = "linetree"
