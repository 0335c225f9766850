from django.urls import path
from .views import CompileAPIView, TokenizeAPIView


urlpatterns = [
    path("compile/", CompileAPIView.as_view(), name="compile"),
    path("tokenize/", TokenizeAPIView.as_view(), name="tokenize"),
]
