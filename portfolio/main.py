"""
Portfolio API

Thin FastAPI backend serving portfolio data and the MDX blog.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.config import get_settings
from portfolio.middleware import (
    RequestIDLogFilter,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    request_id_var,
)
from portfolio.routers import blog, projects, site
from portfolio.services.site_data import load_site_data

logger = logging.getLogger(__name__)

settings = get_settings()

SERVICE_NAME = "portfolio-api"
VERSION = "0.1.0"


def configure_logging(level: str) -> None:
    """Configure root logging with the request ID on every line."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s",
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(RequestIDLogFilter())


configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: load static site data so bad config fails fast."""
    load_site_data()
    yield


app = FastAPI(
    title="Portfolio API",
    description="Portfolio data and file-backed MDX blog",
    version=VERSION,
    lifespan=lifespan,
)

# Last added runs outermost: request IDs, then security headers, then CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIDMiddleware)

# Routers
app.include_router(blog.router, prefix="/api/portfolio")
app.include_router(projects.router, prefix="/api/portfolio")
app.include_router(site.router, prefix="/api/portfolio")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors as JSON, tagged with the request ID."""
    if exc.status_code == 404:
        logger.info("Not found: %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "request_id": request_id_var.get()},
        headers=getattr(exc, "headers", None),
    )


def _check_config() -> str:
    """Verify static site data loads. Returns 'ok' or 'fail'."""
    try:
        load_site_data()
    except Exception:
        logger.exception("Site data failed to load")
        return "fail"
    return "ok"


def _check_content() -> str:
    """Verify the blog directory exists. Returns 'ok' or 'fail'."""
    return "ok" if get_settings().resolved_blog_dir().is_dir() else "fail"


def _run_health_checks() -> dict[str, Any]:
    """Run all health checks, returning the full response body."""
    checks = {"config": _check_config(), "content": _check_content()}
    failed = [k for k, v in checks.items() if v != "ok"]

    if failed:
        overall = "degraded"
        logger.warning("Health check degraded, failed: %s", ", ".join(failed))
    else:
        overall = "ok"

    return {
        "status": overall,
        "service": SERVICE_NAME,
        "version": VERSION,
        "checks": checks,
    }


@app.get("/api/portfolio/health")
async def health_check() -> JSONResponse:
    """Health check verifying configuration and content."""
    return JSONResponse(content=_run_health_checks(), status_code=200)
