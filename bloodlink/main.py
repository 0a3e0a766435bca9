from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bloodlink.core.config import settings
from bloodlink.core.database import init_db
from bloodlink.core.logger import setup_logging
from bloodlink.middleware.cors import configure_cors
from bloodlink.middleware.logging import RequestLoggerMiddleware
from bloodlink.middleware import error_handler

# Routers
from bloodlink.routers import auth as auth_router
from bloodlink.routers import donors as donors_router
from bloodlink.routers import blood_requests as blood_requests_router
from bloodlink.routers import events as events_router
from bloodlink.routers import health as health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    setup_logging()
    description = (
        "BloodLink Backend API.\n\n"
        "Connects blood donors and recipients: accounts, donor profiles and search, "
        "blood requests and donation events."
    )

    openapi_tags = [
        {"name": "authentication", "description": "Register, login and session checks."},
        {"name": "donors", "description": "Donor profiles and the donor search listing."},
        {"name": "blood-requests", "description": "Blood request postings."},
        {"name": "events", "description": "Blood donation and awareness events."},
        {"name": "health", "description": "Health checks and service status endpoints."},
    ]

    app = FastAPI(
        title="BloodLink Backend API",
        version="0.1.0",
        description=description,
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )

    # Middleware
    configure_cors(app)
    app.add_middleware(RequestLoggerMiddleware)

    # Exception handlers
    app.add_exception_handler(StarletteHTTPException, error_handler.http_exception_handler)
    app.add_exception_handler(RequestValidationError, error_handler.request_validation_exception_handler)
    app.add_exception_handler(PydanticValidationError, error_handler.pydantic_validation_exception_handler)
    app.add_exception_handler(Exception, error_handler.unhandled_exception_handler)

    # Include routers
    app.include_router(health_router.router)
    app.include_router(auth_router.router)
    app.include_router(donors_router.router)
    app.include_router(blood_requests_router.router)
    app.include_router(events_router.router)

    # Uploaded profile images
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

    return app


app = create_app()
