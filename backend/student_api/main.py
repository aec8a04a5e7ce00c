"""Student API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix (no auto-discovery)
    - Global error handlers map StudentApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; this module only wires
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_api.api.error_handlers import register_error_handlers
from student_api.api.routes import health, students
from student_api.config import get_settings
from student_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Student API started")
    yield
    logger.info("Student API shutting down")


app = FastAPI(
    title="Student API", version="1.0.0", lifespan=lifespan,
)

# CORS from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(students.router, prefix=settings.api_prefix)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "student_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
