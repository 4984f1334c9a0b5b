"""FastAPI application with lifespan-managed catalog client and announcer."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.router import api_router
from .config import settings
from .synonyms import get_synonym_index

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Shared state accessible by API endpoints
app_state: dict = {}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    get_synonym_index()

    # Catalog listing service (graceful degradation)
    if settings.catalog_enabled:
        from .catalog.client import CatalogClient

        app_state["catalog"] = CatalogClient()
        logger.info("Catalog service enabled: %s", settings.catalog_url)
    else:
        logger.info("Catalog service not configured; requests must carry a catalog")

    # Spoken confirmation (graceful degradation)
    if settings.tts_enabled:
        from .speech.announcer import SpeechAnnouncer

        app_state["announcer"] = SpeechAnnouncer()
        logger.info("Text-to-speech webhook enabled")
    else:
        logger.info("Text-to-speech not configured, skipping")

    yield

    # Shutdown
    catalog = app_state.pop("catalog", None)
    if catalog is not None:
        await catalog.close()
    app_state.clear()
    logger.info("Shutdown complete")


app = FastAPI(title="Voice Order", lifespan=lifespan)
app.include_router(api_router)
