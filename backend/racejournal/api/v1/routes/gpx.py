"""
GPX File Routes

Endpoint for parsing an uploaded GPX file. Nothing is stored: the
parsed route is returned to the caller, which owns persistence.
"""

from fastapi import APIRouter, UploadFile, File, HTTPException

from racejournal.config import settings
from racejournal.features.gpx import GPXParseError, RouteData, parse_track

router = APIRouter()


@router.post("/parse", response_model=RouteData)
async def parse_gpx(file: UploadFile = File(...)):
    """
    Parse an uploaded GPX file.

    Returns track samples, route statistics and map bounds.
    """
    # Validate file
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    # Read content
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_gpx_size_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_gpx_size_mb}MB)"
        )

    # Parse GPX
    try:
        return parse_track(content)
    except GPXParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
