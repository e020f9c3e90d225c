"""
Health check endpoint.
"""

import time
from typing import Any

from fastapi import APIRouter

from waba_webhooks.core.config.settings import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Basic health check with environment information."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": {
            "environment": settings.environment,
            "version": settings.version,
            "log_level": settings.log_level,
        },
    }
