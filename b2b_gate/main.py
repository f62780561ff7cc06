"""B2B Gate API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map B2BGateError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from b2b_gate.infrastructure.observability import setup_logging
from b2b_gate.config import get_settings
from b2b_gate.api.error_handlers import register_error_handlers
from b2b_gate.api.routes import health, visibility

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"B2B Gate API started (snapshot: {settings.snapshot_path})")
    yield
    logger.info("B2B Gate API shutting down")


app = FastAPI(title="B2B Gate API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(visibility.router)

register_error_handlers(app)
