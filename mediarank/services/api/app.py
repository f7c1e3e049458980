from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mediarank.common.errors import MediaRankError
from mediarank.common.logging import get_logger
from mediarank.common.settings import get_settings
from mediarank.services.api.routers import families, health, rankings, search, users

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
logger = get_logger(__name__)


async def _mediarank_error_handler(request: Request, exc: MediaRankError) -> JSONResponse:
    if int(exc.status_code) >= 500:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, int(exc.status_code), exc.message)
    return JSONResponse(status_code=int(exc.status_code), content={"detail": exc.message})


def create_app() -> FastAPI:
    app = FastAPI(
        title="MediaRank API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    app.add_exception_handler(MediaRankError, _mediarank_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(rankings.router)
    app.include_router(search.router)
    app.include_router(users.router)
    app.include_router(families.router)
    return app

app = create_app()
