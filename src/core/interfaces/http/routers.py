"""API router configuration."""

from fastapi import APIRouter

from src.modules.listings.interfaces.router import router as listings_router
from src.modules.sources.interfaces.router import router as sources_router

api_router = APIRouter()

# Video sources (user registry)
api_router.include_router(sources_router)

# Category listings
api_router.include_router(listings_router)
