"""
common.health
~~~~~~~~~~~~~
GET /health/ – liveness + readiness probe.

Returns:
    200  {"status": "ok", "db": "ok", "rate_tables": "seeded"}
    200  {"status": "ok", "db": "ok", "rate_tables": "missing"}   – migrate not run yet
    503  {"status": "degraded", "db": "error: <msg>", "rate_tables": "unknown"}
"""
import structlog
from django.db import DatabaseError, connection
from django.http import JsonResponse

from apps.rate_tables.services.rate_service import get_store, settings_key

logger = structlog.get_logger(__name__)


def health_check(request):
    """Return service health: database connectivity and rate tables presence."""
    try:
        connection.ensure_connection()
        rate_tables = "seeded" if get_store().exists(settings_key()) else "missing"
    except DatabaseError as exc:
        logger.error("health_check_db_failure", error=str(exc))
        return JsonResponse(
            {"status": "degraded", "db": f"error: {exc}", "rate_tables": "unknown"},
            status=503,
        )

    return JsonResponse({"status": "ok", "db": "ok", "rate_tables": rate_tables})
