from django.urls import include, path


urlpatterns = [
    path("api/compiler/", include("compiler.urls")),
]
