from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError

from interview_chat.api.api import api_router
from interview_chat.api.deps import close_gateway, get_engine
from interview_chat.api.endpoints.chat import CHAT_PATH
from interview_chat.api.schemas import HealthResponse
from interview_chat.config.logging_config import setup_logging
from interview_chat.config.settings import settings
from interview_chat.core.engine import InterviewChatEngine
from interview_chat.system.cors import RouteOptionsCORSMiddleware
from interview_chat.system.exceptions import (
    BaseHTTPException,
    common_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)

setup_logging()

VERSION = "1.0.0"
API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    yield
    await close_gateway()


def prepare_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="AI mock interview chat",
        version=VERSION,
        lifespan=lifespan
    )

    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await unhandled_exception_handler(request, exc)

    app.add_middleware(
        RouteOptionsCORSMiddleware,
        options_paths=[API_PREFIX + CHAT_PATH],
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.include_router(api_router, prefix=API_PREFIX)
    app.add_exception_handler(BaseHTTPException, common_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/health", response_model=HealthResponse)
    async def health(engine: InterviewChatEngine = Depends(get_engine)):
        return HealthResponse(
            status="ok",
            version=VERSION,
            model=engine.gateway.model,
            metrics=engine.logger.get_metrics(),
        )

    return app


def start_service() -> None:
    uvicorn.run(
        prepare_app(),
        host=settings.APP_ADDRESS,
        port=settings.APP_PORT,
    )


app = prepare_app()

if __name__ == "__main__":
    start_service()
