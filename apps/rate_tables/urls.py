"""
apps.rate_tables.urls
~~~~~~~~~~~~~~~~~~~~~
HTML routes for the Rate Tables application, mounted at the site root.
The JSON route lives in :mod:`apps.rate_tables.api_urls`.
"""
from django.urls import path

from .views import RateTablesAdminView, public_rate_tables

urlpatterns = [
    # GET/POST /manage/rate-tables/
    path("manage/rate-tables/", RateTablesAdminView.as_view(), name="rate-tables-admin"),
    # GET /rates/?type=certificates
    path("rates/", public_rate_tables, name="rate-tables-public"),
]
