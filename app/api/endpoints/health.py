"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness reports the search backend without failing on it.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.dependencies import AppSettings, SearchService
from app.search.elasticsearch_client import check_connection

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health(settings: AppSettings):
    """Liveness: is the process up?"""
    logger.debug("Health check requested")
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.service_name,
    }


@router.get("/ready")
async def ready(service: SearchService):
    """Readiness: always ready (search falls back to memory); reports Elasticsearch state."""
    if service.es is None:
        backend = "disabled"
    else:
        backend = "up" if await check_connection(service.es) else "down"
    return {"status": "ready", "elasticsearch": backend}
