"""Pricebook API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PricebookError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static React build mounted last so /api/v1/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pricebook.api.error_handlers import register_error_handlers
from pricebook.api.routes import data_points, health, providers, settings as settings_routes
from pricebook.config import get_settings
from pricebook.infrastructure.database import close_db, init_db
from pricebook.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Pricebook API started")
    yield
    logger.info("Pricebook API shutting down")
    await close_db()


app = FastAPI(
    title="Pricebook API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(data_points.router)
app.include_router(providers.router)
app.include_router(settings_routes.router)

register_error_handlers(app)

# Serves the frontend build in production; html=True gives SPA fallback
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
