"""Aggregate API v1 router."""

from fastapi import APIRouter

from lottery_lab.api.v1.endpoints import (
    drawings,
    statistics,
    suggestions,
)

api_router = APIRouter()

api_router.include_router(drawings.router, tags=["Drawings"])
api_router.include_router(statistics.router, prefix="/stats", tags=["Statistics"])
api_router.include_router(suggestions.router, prefix="/suggestions", tags=["Suggestions"])
