"""Aggregate all API routers."""

from fastapi import APIRouter

from . import system, voice

api_router = APIRouter()
api_router.include_router(voice.router)
api_router.include_router(system.router)
