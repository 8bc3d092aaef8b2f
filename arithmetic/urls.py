from django.urls import path
from .views import EvaluateExpressionAPIView


urlpatterns = [
    path("evaluate/", EvaluateExpressionAPIView.as_view(), name="arithmetic-evaluate"),
]
