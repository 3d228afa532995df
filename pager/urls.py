from django.urls import path, include

app_name = "pager"

urlpatterns = [
    # API
    path("api/", include(("pager.api_urls", "pager_api"), namespace="pager_api")),
]
