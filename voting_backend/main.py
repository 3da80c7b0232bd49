"""
Application entrypoint.

Builds the FastAPI app, mounts the API router under `/api`, configures CORS
and logging, and creates the database schema on startup.

Run with::

    uvicorn voting_backend.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from voting_backend.api.fast_api import router
from voting_backend.database.config.config import settings
from voting_backend.database.core.errors import PersistenceError
from voting_backend.database.db import init_db
from voting_backend.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    """Turn any database failure escaping a route into a structured 500."""
    logger.error("Unhandled persistence error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"status": False, "message": exc.message})


def create_app(init_database: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    init_database : bool
        Create the schema on startup. Tests disable it and manage their own engine.
    """
    app = FastAPI(
        title="Voting API",
        version="1.0.0",
        lifespan=lifespan if init_database else None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.include_router(router, prefix="/api")
    return app


setup_logging()
app = create_app()
"""Application instance served by uvicorn"""
