"""Resume Learning API - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resume_learning.core.config import Settings, get_settings
from resume_learning.core.errors import AppError, DecodeError
from resume_learning.db.base import Base
from resume_learning.db.session import create_engine, make_sessionmaker, ping
from resume_learning.routers import api, auth, progress
from resume_learning.schemas.common import ErrorResponse
from resume_learning.services.seeding import seed_chapters

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine = create_engine(settings)
    try:
        # unreachable store aborts startup
        await ping(engine)
        logger.info("Connected to record store")

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        app.state.engine = engine
        app.state.sessionmaker = make_sessionmaker(engine)

        if settings.seed_on_startup:
            async with app.state.sessionmaker() as db:
                await seed_chapters(db)
    except Exception:
        logger.exception("Failed to initialize record store")
        await engine.dispose()
        raise

    yield

    logger.info("Shutting down, closing record store")
    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Resume-where-you-left-off learning: chapters, video and quiz progress",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def decode_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Undecodable body on %s: %s", request.url.path, exc.errors())
        err = DecodeError()
        return _error(err.status_code, err.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s", request.url.path)
        return _error(500, "Internal server error")

    app.include_router(api.router)
    app.include_router(auth.router)
    app.include_router(progress.router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info("Server starting on %s:%d, API at /api", settings.host, settings.port)
    uvicorn.run("resume_learning.main:app", host=settings.host, port=settings.port)
