#!/usr/bin/env python3
"""
Daily Pulse API
FastAPI application serving dashboard metrics, daily entries and settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_service_config, get_settings
from .endpoints import business, dashboard, entries, settings as settings_endpoints
from .models import HealthResponse
from ..integrations.supabase_integration import SupabaseStore

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the store client on startup and close it on shutdown."""
    service_config = get_service_config()
    store = None
    if service_config.supabase.url and service_config.supabase.anon_key:
        store = SupabaseStore(service_config.supabase)
    else:
        logger.warning("SUPABASE_URL/SUPABASE_ANON_KEY not set; store endpoints will return 503")
    app.state.store = store

    yield

    if store is not None:
        await store.close()
        logger.info("Supabase store closed")


app = FastAPI(
    title=settings.api_title,
    description="Daily revenue tracking with rolling KPIs, goal pace and insights",
    version=settings.api_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dashboard.router)
app.include_router(entries.router)
app.include_router(settings_endpoints.router)
app.include_router(business.router)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=settings.api_version,
        store_configured=getattr(app.state, "store", None) is not None,
    )
