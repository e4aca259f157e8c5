"""
Health check endpoints for the factorial service.

Reports liveness plus cache reachability. An unreachable cache degrades the
service but does not make it unhealthy, since every request can still be
computed.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...core.config import Settings
from ...domain.factorial.repository_interfaces import FactorialCacheStore
from ..dependencies import cache_store_provider, settings_provider

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    settings: Settings = Depends(settings_provider),
    store: FactorialCacheStore = Depends(cache_store_provider),
) -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Returns "healthy" when the cache answers a ping and "degraded" otherwise.
    """
    reachable = await store.ping()

    return {
        "status": "healthy" if reachable else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.OTEL_SERVICE_NAME,
        "version": settings.OTEL_SERVICE_VERSION,
        "environment": settings.ENVIRONMENT,
        "cache": {"reachable": reachable, **store.get_status()},
    }
