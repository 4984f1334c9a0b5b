"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ..schemas import HealthResponse, ServiceStatus
from ..synonyms import get_synonym_index

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    from ..main import app_state

    services: list[ServiceStatus] = []

    # Synonym index (loaded at startup; a bad synonyms file stops the app)
    keys = len(get_synonym_index())
    services.append(ServiceStatus(name="synonyms", status="ok", detail=f"{keys} canonical keys"))

    # Catalog listing service
    if app_state.get("catalog"):
        services.append(ServiceStatus(name="catalog", status="ok"))
    else:
        services.append(ServiceStatus(name="catalog", status="unavailable", detail="not configured"))

    # Text-to-speech
    if app_state.get("announcer"):
        services.append(ServiceStatus(name="tts", status="ok"))
    else:
        services.append(ServiceStatus(name="tts", status="unavailable", detail="not configured"))

    return HealthResponse(status="ok", synonym_keys=keys, services=services)
