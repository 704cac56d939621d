"""
API package initialization.

This package contains FastAPI router modules for the Insight panel:
- insights: insight reports, data quality, series extraction, panel view
"""

from fastapi import APIRouter

from insight_panel.api.insights import router as insights_router

# Create main API router
api_router = APIRouter()

api_router.include_router(insights_router)  # insights router has its own prefix and tags

__all__ = [
    "api_router",
    "insights_router",
]
