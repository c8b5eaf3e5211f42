"""
FastAPI application entry point.
Challenge: Mount routes, middleware (CORS, request logging, Prometheus), shared client lifecycle.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from catalog.api.router import api_router
from catalog.config import get_settings
from catalog.core.errors import register_exception_handlers
from catalog.core.logging import configure_logging
from catalog.search.index import SearchServiceError
from catalog.search.meilisearch_client import close_meilisearch, get_meilisearch

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: check Meilisearch is reachable. Shutdown: close the shared client."""
    client = await get_meilisearch()
    try:
        await client.health()
        logger.info("Connected to Meilisearch successfully")
    except SearchServiceError as e:
        # Search endpoints answer 500 until Meilisearch comes up; health stays green
        logger.warning("Meilisearch is not reachable: %s", e)
    yield
    await close_meilisearch()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Search, lookup and statistics for the product catalog indexed in Meilisearch.",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS for frontend/API consumers; every response carries the headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    # Registered after CORS so it wraps it: any OPTIONS answers 200 before the preflight checks
    @app.middleware("http")
    async def short_circuit_preflight(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(
                status_code=200,
                headers={
                    "Access-Control-Allow-Origin": "*",
                    "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
                    "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
                },
            )
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        client = request.client.host if request.client else "-"
        logger.info(
            "%s %s from %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            client,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    register_exception_handlers(app)

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("catalog.main:app", host=settings.host, port=settings.port, log_config=None)
