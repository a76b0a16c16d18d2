"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from racejournal.api.v1.routes import gpx, stats

api_router = APIRouter()

api_router.include_router(gpx.router, prefix="/gpx", tags=["GPX"])
api_router.include_router(stats.router, prefix="/stats", tags=["Stats"])
