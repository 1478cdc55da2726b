"""
apps.rate_tables.views
~~~~~~~~~~~~~~~~~~~~~~
Thin views for the Rate Tables application.
All business logic is delegated to :mod:`apps.rate_tables.services`.

Endpoints
---------
GET/POST  /manage/rate-tables/   – Staff editor (HTML form)
GET       /rates/?type=<sel>     – Public, read-only tables
GET/PUT   /api/v1/rate-tables/   – JSON read (anyone) / full replace (admin)
"""
from __future__ import annotations

import structlog
from django.contrib.admin.views.decorators import staff_member_required
from django.http import HttpRequest, HttpResponse, HttpResponseForbidden
from django.shortcuts import render
from django.urls import Resolver404, resolve
from django.utils.decorators import method_decorator
from django.views import View
from django.views.csrf import csrf_failure as django_csrf_failure
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.rate_tables import services
from apps.rate_tables.domain import SELECT_ALL
from apps.rate_tables.services.renderer import Notice, render_editable
from common.exceptions import AuthorizationError, StoreWriteError
from .serializers import RateTableSetSerializer

logger = structlog.get_logger(__name__)

SUCCESS_MESSAGE = "Rates updated successfully!"
EDITOR_URL_NAME = "rate-tables-admin"


@method_decorator(staff_member_required, name="dispatch")
class RateTablesAdminView(View):
    """GET shows the editor; POST replaces every table and re-renders it."""

    def get(self, request: HttpRequest) -> HttpResponse:
        rate_set = services.load_rate_tables(services.get_store())
        return HttpResponse(render_editable(rate_set, request=request))

    def post(self, request: HttpRequest) -> HttpResponse:
        store = services.get_store()
        try:
            rate_set = services.submit_rate_form(store, request.POST)
        except StoreWriteError as exc:
            rate_set = services.load_rate_tables(store)
            notice = Notice(level="error", message=exc.detail)
            return HttpResponse(
                render_editable(rate_set, request=request, notice=notice),
                status=exc.status_code,
            )

        notice = Notice(level="success", message=SUCCESS_MESSAGE)
        return HttpResponse(render_editable(rate_set, request=request, notice=notice))


def csrf_failure(request: HttpRequest, reason: str = "") -> HttpResponse:
    """
    ``CSRF_FAILURE_VIEW``: the submission is rejected before any view runs,
    so the stored tables are untouched.  Staff posting to the editor get it
    back, showing the stored state and an error banner; other editor requests
    get a bare 403.  Every other path gets Django's stock failure page.
    """
    try:
        url_name = resolve(request.path_info).url_name
    except Resolver404:
        url_name = None
    if url_name != EDITOR_URL_NAME:
        return django_csrf_failure(request, reason=reason)

    error = AuthorizationError()
    logger.warning(
        "csrf_rejected",
        code=error.code,
        path=request.path,
        reason=reason,
    )

    user = getattr(request, "user", None)
    if user is None or not user.is_staff:
        return HttpResponseForbidden(error.detail)

    rate_set = services.load_rate_tables(services.get_store())
    return HttpResponse(
        render_editable(
            rate_set,
            request=request,
            notice=Notice(level="error", message=error.detail),
        ),
        status=error.status_code,
    )


def public_rate_tables(request: HttpRequest) -> HttpResponse:
    """Public page showing the tables picked by ``?type=`` (default all)."""
    selector = request.GET.get("type", SELECT_ALL)
    return render(request, "rate_tables/public_page.html", {"selector": selector})


class RateTableSetView(APIView):
    """GET / PUT /api/v1/rate-tables/ – the whole stored set as JSON."""

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [permissions.IsAdminUser()]

    @extend_schema(
        summary="Get Rate Tables",
        description="Returns every rate table in its persisted layout.",
        responses={200: RateTableSetSerializer},
        tags=["Rate Tables"],
    )
    def get(self, request: Request) -> Response:
        rate_set = services.load_rate_tables(services.get_store())
        return Response(rate_set.to_dict(), status=status.HTTP_200_OK)

    @extend_schema(
        summary="Replace Rate Tables",
        description=(
            "Replaces every rate table.  Columns with an empty or repeated key "
            "are dropped and rows are rebuilt from the remaining columns, "
            "exactly as for the admin editor."
        ),
        request=RateTableSetSerializer,
        responses={
            200: RateTableSetSerializer,
            400: OpenApiResponse(description="Payload does not match the table layout."),
            403: OpenApiResponse(description="Not an administrator or CSRF check failed."),
            503: OpenApiResponse(description="The settings store rejected the write."),
        },
        tags=["Rate Tables"],
    )
    def put(self, request: Request) -> Response:
        serializer = RateTableSetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        rate_set = services.replace_rate_tables(
            services.get_store(),
            services.normalize_rate_table_set(serializer.validated_data),
        )
        return Response(rate_set.to_dict(), status=status.HTTP_200_OK)
