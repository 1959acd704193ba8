"""
FastAPI application with assembled routers.

Initializes the FastAPI app with the JSON API, lead endpoints, SEO files and
the server-rendered public site, and configures the uvicorn server.

Dependencies: fastapi, franchise_site.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from franchise_site.api.auth_gate import AuthGateMiddleware
from franchise_site.api.deps.dependencies import get_service_cache
from franchise_site.boundary.db import create_all_tables
from franchise_site.configs import get_settings
from franchise_site.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)

from .routers import (
    agents_router,
    audit_logs_router,
    auth_router,
    contact_submissions_router,
    franchises_router,
    health_router,
    import_router,
    industries_router,
    leads_router,
    media_router,
    pages_router,
    preview_router,
    seo_router,
    site_router,
    site_settings_router,
    tags_router,
    users_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    if settings.database.create_tables:
        logger.info("Creating missing database tables...")
        await create_all_tables()

    cache = get_service_cache()
    # Trigger property access so templates and clients load once
    _ = cache.page_renderer
    _ = cache.email_renderer
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="Future Franchise Owners",
        description="Franchise marketing site, catalog and lead capture API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        AuthGateMiddleware,
        cookie_name=settings.auth.cookie_name,
        login_path=settings.auth.login_path,
    )

    # Add observability middleware (correlation outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register JSON API routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(franchises_router, prefix="/api/v1")
    app.include_router(agents_router, prefix="/api/v1")
    app.include_router(industries_router, prefix="/api/v1")
    app.include_router(tags_router, prefix="/api/v1")
    app.include_router(pages_router, prefix="/api/v1")
    app.include_router(media_router, prefix="/api/v1")
    app.include_router(contact_submissions_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(site_settings_router, prefix="/api/v1")
    app.include_router(audit_logs_router, prefix="/api/v1")

    # Form, import and preview endpoints keep their site paths
    app.include_router(leads_router, prefix="/api")
    app.include_router(import_router, prefix="/api")
    app.include_router(preview_router, prefix="/api")

    app.include_router(seo_router)
    # Catch-all /{slug} must stay last
    app.include_router(site_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "franchise_site.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
