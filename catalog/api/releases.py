# catalog/api/releases.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Engine

from catalog.api.dependencies import get_writer
from catalog.db.engine import get_engine
from catalog.models.releases import ReleaseIn, ReleaseOut
from catalog.services import listing
from catalog.services.writer import EntityWriter

router = APIRouter(prefix="/releases", tags=["releases"])


@router.get("", response_model=List[ReleaseOut])
def list_releases(
    artist_id: Optional[str] = Query(default=None, description="Exact match"),
    genre: Optional[str] = Query(default=None, description="Case-insensitive exact match"),
    status: Optional[str] = Query(default=None, description="Case-insensitive exact match"),
    engine: Engine = Depends(get_engine),
) -> List[ReleaseOut]:
    """
    Return releases matching every supplied filter.
    """
    rows = listing.list_releases(engine, artist_id=artist_id, genre=genre, status=status)
    return [ReleaseOut(**row) for row in rows]


@router.post("", response_model=ReleaseOut, status_code=201)
def create_release(
    payload: ReleaseIn,
    writer: EntityWriter = Depends(get_writer),
) -> ReleaseOut:
    """
    Create a release for an existing artist (404 if the artist is unknown).
    """
    created = writer.create_release(payload.model_dump())
    return ReleaseOut(**created)
