"""FastAPI application exposing the JSON Formatter service."""

import logging
import time
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, get_settings
from ..json_formatter import JSONFormatter
from .models import (
    FileUploadRequest,
    HealthResponse,
    HistoryRecordResponse,
    ProcessRequest,
    ProcessResponse,
    TreeRequest,
    TreeResponse,
    ValidateRequest,
    ValidationResponse,
)

logger = logging.getLogger(__name__)


def get_formatter(request: Request) -> JSONFormatter:
    """Dependency returning the formatter attached to the running app."""
    return request.app.state.formatter


def create_app(formatter: Optional[JSONFormatter] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        formatter: Optional pre-built formatter; one is created at startup otherwise
        settings: Optional settings; defaults to the environment settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or (formatter.settings if formatter else get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "formatter", None) is None:
            app.state.formatter = JSONFormatter(settings=settings)
        logger.info("JSON Formatter API started")

        yield

        logger.info("JSON Formatter API shutting down")
        app.state.formatter = None

    app = FastAPI(
        title="JSON Formatter API",
        description="Validate, format, minify and sort JSON documents",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.formatter = formatter

    _setup_middleware(app, settings)
    _setup_routes(app)
    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup CORS and request logging middleware."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.3f}s"
        )
        return response


def _setup_routes(app: FastAPI) -> None:
    """Setup API routes."""

    @app.get("/health", response_model=HealthResponse)
    async def healthcheck(formatter: JSONFormatter = Depends(get_formatter)):
        return await formatter.healthcheck()

    @app.post("/api/process", response_model=ProcessResponse)
    async def process_json(body: ProcessRequest,
                           formatter: JSONFormatter = Depends(get_formatter)):
        result = await formatter.process_json(body.json_content, body.operation, body.indent_size)
        return result.to_dict()

    @app.post("/api/validate", response_model=ValidationResponse)
    async def validate_json(body: ValidateRequest,
                            formatter: JSONFormatter = Depends(get_formatter)):
        result = await formatter.validate_json(body.json_content)
        return result.to_dict()

    @app.post("/api/upload", response_model=ProcessResponse)
    async def process_file_upload(body: FileUploadRequest,
                                  formatter: JSONFormatter = Depends(get_formatter)):
        result = await formatter.process_file_upload(body.file_name, body.file_content, body.file_size)
        return result.to_dict()

    @app.get("/api/history", response_model=List[HistoryRecordResponse])
    async def get_history(formatter: JSONFormatter = Depends(get_formatter)):
        records = await formatter.get_history()
        return [record.to_dict() for record in records]

    @app.post("/api/tree", response_model=TreeResponse)
    async def render_tree(body: TreeRequest,
                          formatter: JSONFormatter = Depends(get_formatter)):
        return await formatter.render_tree(body.json_content, body.expand_depth)


def run_server(settings: Optional[Settings] = None) -> None:
    """Run the API with uvicorn using the configured host and port."""
    settings = settings or get_settings()
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
