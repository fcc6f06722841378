"""
Health check routes for product service
"""

from datetime import datetime
from fastapi import APIRouter, Request, HTTPException
import structlog

from product_service.utils.config import get_app_config

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    config = get_app_config()
    try:
        store = getattr(request.app.state, 'store', None)
        if store is not None:
            await store.ping()
            storage_status = "healthy"
        else:
            storage_status = "not_initialized"

        return {
            "service": config.service_name,
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "storage": storage_status,
            "backend": config.storage_backend,
            "version": config.service_version
        }

    except Exception as e:
        logger.error("Health check failed", error=str(e))
        raise HTTPException(status_code=503, detail="Service unavailable")
