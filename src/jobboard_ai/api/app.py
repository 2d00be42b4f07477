"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobboard_ai.api.auth import BearerTokenAuthenticator, NotAuthenticated
from jobboard_ai.api.routes import router
from jobboard_ai.clients.llm_client import LLMClient
from jobboard_ai.config import AppConfig, load_config, require_api_key
from jobboard_ai.errors import UpstreamGenerationError, ValidationError
from jobboard_ai.logging.usage_store import UsageStore
from jobboard_ai.pipeline.assistant import CareerAssistant

logger = logging.getLogger(__name__)

Authenticator = Callable[[Request], Awaitable[str]]


def create_app(assistant: CareerAssistant, authenticator: Authenticator) -> FastAPI:
    app = FastAPI(title="Job Board AI API", version="1.0.0")
    app.state.assistant = assistant
    app.state.authenticator = authenticator
    app.include_router(router)

    @app.exception_handler(NotAuthenticated)
    async def _unauthorized(request: Request, exc: NotAuthenticated) -> JSONResponse:
        return JSONResponse(status_code=401, content={"message": "Unauthorized"})

    @app.exception_handler(ValidationError)
    async def _invalid(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _malformed(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"message": "Invalid request body"})

    @app.exception_handler(UpstreamGenerationError)
    async def _upstream(request: Request, exc: UpstreamGenerationError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"message": exc.user_message})

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


def build_app(config: AppConfig | None = None) -> FastAPI:
    """Wire the production app from config and environment.

    Fails fast with ``ConfigError`` when the provider API key is missing.
    """
    config = config or load_config()
    api_key = require_api_key()
    llm = LLMClient(
        api_key=api_key,
        timeout=config.llm.timeout,
        model=config.llm.model,
        default_max_tokens=config.llm.default_max_tokens,
    )
    store = UsageStore(config.usage.resolved_db_path) if config.usage.enabled else None
    if not config.server.api_tokens:
        logger.warning("No API tokens configured; every AI request will be rejected")
    return create_app(
        CareerAssistant(llm, usage_store=store),
        BearerTokenAuthenticator(config.server.api_tokens),
    )
