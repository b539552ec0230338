"""
Fitracker FastAPI Application

Main entry point for the Fitracker progress API.
Uses the generic common/ library for infrastructure and fitracker/ for
the progress endpoint.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Common library imports
from common.database import MongoDB, get_main_database, set_main_database
from common.utils import APIException, error_response, success_response

# App-specific imports
from fitracker.config import settings
from fitracker.dependencies import init_progress_services
from fitracker.routers import progress_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Fails fast on missing configuration. The database handle is created here
    but only connects on the first request that needs it.
    """
    # Startup
    logger.info("Starting Fitracker API...")
    settings.validate_required()

    main_db = MongoDB(uri=settings.MONGODB_URI, database_name=settings.MONGODB_DATABASE)
    set_main_database(main_db)
    init_progress_services(main_db, collection_name=settings.PROGRESS_COLLECTION)
    logger.info("Fitracker API started successfully!")

    yield

    # Shutdown
    logger.info("Shutting down Fitracker API...")
    await main_db.disconnect()
    logger.info("Fitracker API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Fitracker API",
    description="Daily food, exercise, and supplement progress log",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================
ERROR_CODE_HEADER = "X-Error-Code"


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Render HTTP errors.

    Server errors carry a JSON body with a diagnostic; client errors are
    plain text. Application errors also name their code in X-Error-Code.
    """
    headers = dict(getattr(exc, "headers", None) or {})
    if isinstance(exc, APIException) and exc.code:
        headers[ERROR_CODE_HEADER] = exc.code

    if exc.status_code >= 500:
        details = exc.details if isinstance(exc, APIException) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(str(exc.detail), details=details),
            headers=headers,
        )

    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=headers)


# =============================================================================
# Include Routers
# =============================================================================
API_PREFIX = "/api"

app.include_router(progress_router, prefix=API_PREFIX, tags=["Progress"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Reports whether the lazily created database client exists yet.
    """
    try:
        connected = get_main_database().is_connected
    except RuntimeError:
        connected = False

    return success_response({
        "status": "ok",
        "version": "1.0.0",
        "database": connected,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
