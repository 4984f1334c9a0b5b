"""Voice order parsing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..assistant import process_order
from ..catalog import CatalogError
from ..config import settings
from ..models import Product
from ..schemas import LineItemResponse, ParseRequest, ParseResponse, SynonymResponse
from ..synonyms import get_synonym_index

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["voice-order"])


async def _load_catalog(body: ParseRequest) -> list[Product]:
    if body.catalog is not None:
        return [p.to_product() for p in body.catalog]

    from ..main import app_state

    client = app_state.get("catalog")
    if client is None:
        raise HTTPException(503, "Catalog service is not configured; send a catalog with the request")
    try:
        return await client.fetch_catalog()
    except CatalogError as e:
        logger.warning("Catalog fetch failed: %s", e)
        raise HTTPException(502, f"Catalog service error: {e}") from e


@router.post("/voice-order/parse", response_model=ParseResponse)
async def parse_voice_order(body: ParseRequest):
    from ..main import app_state

    language = body.language or settings.default_language
    catalog = [] if not body.text.strip() else await _load_catalog(body)
    announcer = app_state.get("announcer") if body.announce else None

    reply = process_order(body.text, catalog, language, announcer=announcer)
    return ParseResponse(
        outcome=reply.outcome.value,
        message=reply.message,
        language=language,
        items=[LineItemResponse.from_line(line) for line in reply.result.items],
        unresolved=reply.result.unresolved,
        token_count=reply.result.token_count,
    )


@router.get("/synonyms/{key}", response_model=SynonymResponse)
def get_synonyms(key: str):
    index = get_synonym_index()
    if key not in index:
        raise HTTPException(404, f"No synonyms declared for '{key}'")
    return SynonymResponse(key=key, variants=sorted(index.variants(key)))
