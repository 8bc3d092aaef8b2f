from django.urls import include, path


urlpatterns = [
    path("api/arithmetic/", include("arithmetic.urls")),
]
