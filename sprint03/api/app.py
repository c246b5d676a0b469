"""FastAPI web application for Sprint03."""

import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from sprint03 import __version__
from sprint03.database.database import init_db
from sprint03.api.nome_usuarios import router as nome_usuarios_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database schema ready")
    yield


def create_app() -> FastAPI:
    """Build the application from the current environment.

    - APP_ENV: API docs are only published when this is "development" (default).
    - HTTPS_REDIRECT: "true" redirects plain HTTP requests to HTTPS.
    """
    app_env = os.getenv("APP_ENV", "development").lower()
    is_development = app_env == "development"

    application = FastAPI(
        title="Sprint03 API",
        description="API para gerenciamento de usuários.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if is_development else None,
        redoc_url="/redoc" if is_development else None,
        openapi_url="/openapi.json" if is_development else None,
    )

    if os.getenv("HTTPS_REDIRECT", "False").lower() == "true":
        application.add_middleware(HTTPSRedirectMiddleware)

    application.include_router(nome_usuarios_router)

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    logger.debug(f"Application created (env={app_env})")
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
