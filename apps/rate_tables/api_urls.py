"""
apps.rate_tables.api_urls
~~~~~~~~~~~~~~~~~~~~~~~~~
Mounted at /api/v1/ by the root URLconf.
"""
from django.urls import path

from .views import RateTableSetView

urlpatterns = [
    path("rate-tables/", RateTableSetView.as_view(), name="rate-tables-api"),
]
