"""CORS policy: a single allowed front-end origin, credentials allowed."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bloodlink.core.config import settings

ALLOWED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]


def configure_cors(app: FastAPI) -> None:
    origins = [o.strip() for o in (settings.BACKEND_CORS_ORIGINS or "").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
    )
