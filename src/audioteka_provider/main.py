from __future__ import annotations

from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from audioteka_provider.api.routes import health, search
from audioteka_provider.core.config import get_settings
from audioteka_provider.core.logging import configure_logging, logger
from audioteka_provider.scrape.provider import AudiotekaProvider, build_provider


def create_app(provider: Optional[AudiotekaProvider] = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.debug)

    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.state.provider = provider or build_provider(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    app.include_router(health.router)
    app.include_router(search.router)
    return app


def run() -> None:
    settings = get_settings()
    app = create_app()
    logger.info("Audioteka provider listening on port %s", settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


app = create_app()
