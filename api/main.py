"""
PC Catalog API - FastAPI Main Application
Filter → Sort → Paginate over a read-only component catalog
"""

import logging
import sys
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from api.config import ConfigError, Settings
from api.rate_limit import build_limiter, rate_limit_handler
from api.routers.catalog import build_router
from api.schemas import ErrorResponse, HealthResponse
from pc_catalog_core.engine.pipeline import NoDataAvailable
from pc_catalog_core.infra.catalog_source import CatalogSource, get_reference_catalog

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

# Application metadata
APP_NAME = "PC Catalog API"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "PC hardware component catalog with filtering, sorting and pagination"

REQUIRED_TEMPLATES = ("index.html", "components.html")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once per process"""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def load_templates(settings: Settings) -> Jinja2Templates:
    """
    Load the view templates.

    Raises:
        ConfigError: templates directory or a required template is missing
    """
    templates_dir = settings.TEMPLATES_DIR
    if not templates_dir.is_dir():
        raise ConfigError(f"Templates directory not found: {templates_dir}")

    missing = [name for name in REQUIRED_TEMPLATES if not (templates_dir / name).is_file()]
    if missing:
        raise ConfigError(f"Missing templates in {templates_dir}: {', '.join(missing)}")

    return Jinja2Templates(directory=str(templates_dir))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    app.state.start_time = time.time()
    logger.info(f"Starting {APP_NAME} with {len(app.state.catalog)} components")
    yield
    logger.info(f"{APP_NAME} shut down")


async def inject_trace_id(request: Request, call_next):
    """Inject trace ID into all requests and responses"""
    trace_id = request.headers.get("X-Trace-Id", uuid.uuid4().hex)

    logger_adapter = logging.LoggerAdapter(logger, {"trace_id": trace_id})
    request.state.trace_id = trace_id

    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    response.headers["X-Trace-Id"] = trace_id
    response.headers["X-Process-Time"] = str(process_time)

    logger_adapter.info(
        f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s"
        f" [trace {trace_id}]"
    )
    return response


async def no_data_handler(request: Request, exc: NoDataAvailable):
    """Empty pipeline result"""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=jsonable_encoder(ErrorResponse(error=exc.message)),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=jsonable_encoder(ErrorResponse(error="Internal server error")),
    )


async def health_check(request: Request):
    """Health check endpoint"""
    return JSONResponse(
        content=jsonable_encoder(HealthResponse(
            status="healthy",
            components=len(request.app.state.catalog),
            uptime=time.time() - getattr(request.app.state, "start_time", time.time()),
        ))
    )


def create_app(
    settings: Optional[Settings] = None,
    catalog_source: Optional[CatalogSource] = None,
    templates: Optional[Jinja2Templates] = None,
    limiter: Optional[Limiter] = None,
) -> FastAPI:
    """
    Build the application with its collaborators.

    Anything not passed in is built from ``settings``: the reference
    catalog, templates from TEMPLATES_DIR and a limiter from the
    RATE_LIMIT_* values.

    Raises:
        ConfigError: templates cannot be loaded
    """
    settings = settings or Settings()

    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description=APP_DESCRIPTION,
        lifespan=lifespan,
        docs_url=None if settings.is_production() else "/docs",
        redoc_url=None if settings.is_production() else "/redoc",
    )
    app.state.settings = settings
    app.state.catalog = catalog_source if catalog_source is not None else get_reference_catalog()
    app.state.templates = templates if templates is not None else load_templates(settings)

    # Configure rate limiting
    limiter = limiter or build_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

    app.middleware("http")(inject_trace_id)

    app.add_exception_handler(NoDataAvailable, no_data_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.add_api_route("/healthz", health_check, methods=["GET"], include_in_schema=False)
    app.include_router(build_router(limiter, settings))

    return app


def main() -> None:
    """Run the API under uvicorn until SIGINT/SIGTERM"""
    try:
        settings = Settings()
        configure_logging(settings.APP_LOG_LEVEL)
        app = create_app(settings)
    except ConfigError as e:
        configure_logging()
        logger.critical(f"Configuration Error: {e}")
        sys.exit(1)

    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=settings.APP_HOST,
            port=settings.APP_PORT,
            log_level=settings.APP_LOG_LEVEL.lower(),
            timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_SECONDS,
        )
    )

    logger.info(f"Listening on {settings.APP_HOST}:{settings.APP_PORT}")
    try:
        server.run()
    except Exception as e:
        logger.critical(f"Server error: {e}", exc_info=True)
        sys.exit(1)
    logger.info("Server gracefully stopped")


if __name__ == "__main__":
    main()
