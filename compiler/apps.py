from django.apps import AppConfig


class CompilerConfig(AppConfig):
    name = "compiler"
    verbose_name = "S-expression compiler"
