"""FastAPI application entrypoint.

The translate endpoint lives at / and answers CORS preflight itself, so no
CORSMiddleware is installed. Auto-generated OpenAPI docs at /docs.

A CopilotProvider sharing one httpx.AsyncClient is created once during the
lifespan and stored on app.state for injection via Depends().
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import httpx
import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.health import router as health_router
from app.api.translate import router as translate_router
from app.core.config import settings
from app.core.cors import get_json_headers
from app.core.exceptions import (
    MethodNotAllowedError,
    TranslateAPIError,
    internal_error_body,
)
from app.services.llm.copilot import CopilotProvider


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    Creates the shared HTTP client and the singleton LLM provider, and
    attaches the provider to app.state. Retrieved in request handlers via
    Depends() in app/api/deps.py.
    """
    # --- Startup ---
    logger.info("app_startup", env=settings.app_env)

    client = httpx.AsyncClient(timeout=settings.copilot_timeout_seconds)
    app.state.llm_provider = CopilotProvider(
        client=client,
        base_url=settings.copilot_base_url,
    )

    logger.info("app_providers_ready")
    yield

    # --- Shutdown ---
    logger.info("app_shutdown")
    await client.aclose()


app = FastAPI(
    title="Copilot Translate API",
    description="Stateless text translation with automatic language detection.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(TranslateAPIError)
async def translate_api_error_handler(request: Request, exc: TranslateAPIError) -> JSONResponse:
    """Structured error response for translate API exceptions raised outside a route body."""
    content = exc.to_dict() if exc.status_code < 500 else internal_error_body(exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=get_json_headers(),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render router-level 405s (methods no route accepts) like the translate endpoint does."""
    if exc.status_code == 405:
        return await translate_api_error_handler(request, MethodNotAllowedError())
    return await http_exception_handler(request, exc)


app.include_router(health_router)
app.include_router(translate_router)


def run() -> None:
    """Run the development server."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
