"""
Product Service - Main Application
Handles product catalog records: create, list, fetch, update and delete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from product_service.routes import health, products
from product_service.services.product_service import ProductService, build_store
from product_service.utils.config import get_app_config
from product_service.utils.store import ProductStore


def configure_logging(log_level: str = "info") -> None:
    """Configure structured logging"""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger(__name__)


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Build the application; a store may be passed in to bypass configuration"""
    config = get_app_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info("Starting Product Service", backend=config.storage_backend)

        product_store = store or build_store(config)
        try:
            await product_store.initialize()
            app.state.store = product_store
            app.state.product_service = ProductService(product_store)
            logger.info("Product store initialized")
        except Exception as e:
            logger.error("Failed to initialize product store", error=str(e))
            raise

        yield

        # Cleanup
        if hasattr(app.state, 'store'):
            await app.state.store.close()
            logger.info("Product store closed")

        logger.info("Product Service shutdown complete")

    app = FastAPI(
        title="Product Service",
        description="Manages product catalog records",
        version=config.service_version,
        docs_url=config.docs_url,
        redoc_url="/redoc",
        lifespan=lifespan
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests"""
        logger.info(
            "Request received",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown"
        )

        response = await call_next(request)

        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code
        )

        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            method=request.method,
            url=str(request.url),
            exc_info=True
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            }
        )

    # Register routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(products.router, prefix=f"{config.api_prefix}/product", tags=["Products"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": config.service_name,
            "version": config.service_version,
            "status": "running",
            "docs": config.docs_url
        }

    return app


configure_logging(get_app_config().log_level)

app = create_app()


if __name__ == "__main__":
    import uvicorn
    config = get_app_config()
    uvicorn.run(
        "product_service.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level
    )
