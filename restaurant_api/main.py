"""
Restaurant Ordering - FastAPI Backend Application
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from starlette.concurrency import run_in_threadpool
import structlog

from restaurant_api.config import settings
from restaurant_api.api import actions, auth, locations, menu, notifications, orders, promotions


def configure_logging() -> None:
    """Configure structured logging"""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting restaurant ordering API", version="1.0.0")
    yield
    from restaurant_api.database import engine

    await engine.dispose()
    logger.info("Shutting down restaurant ordering API")


# Create FastAPI application
app = FastAPI(
    title="Restaurant Ordering API",
    description="Menu, deals, checkout, order tracking and promo codes for the restaurant website",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials="*" not in settings.cors_origins_list,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# Health check endpoints
@app.get("/health")
async def health():
    """Basic health check"""
    return {"status": "healthy", "service": "api", "version": "1.0.0"}


@app.get("/health/ready")
async def ready():
    """Readiness check with dependency verification"""
    from restaurant_api.database import SessionLocal

    checks = {}

    # Check database
    try:
        async with SessionLocal() as db:
            await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as e:
        logger.warning("Database readiness check failed", error=str(e))
        checks["database"] = "failed"

    # Check Redis
    try:
        from restaurant_api.jobs.celery_app import celery_app
        await run_in_threadpool(celery_app.control.ping, timeout=1)
        checks["redis"] = "ok"
    except Exception as e:
        logger.warning("Broker readiness check failed", error=str(e))
        checks["redis"] = "failed"

    all_ok = all(v == "ok" for v in checks.values())

    return {
        "status": "ready" if all_ok else "not_ready",
        "checks": checks,
    }


# Include API routers
app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
app.include_router(menu.router, prefix="/menu_items", tags=["Menu"])
app.include_router(promotions.router, tags=["Promotions"])
app.include_router(orders.router, prefix="/orders", tags=["Orders"])
app.include_router(locations.router, prefix="/locations", tags=["Locations"])
app.include_router(notifications.router, tags=["Notifications"])

# Storefront action endpoints
app.include_router(actions.router, tags=["Actions"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "restaurant_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
