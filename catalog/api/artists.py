# catalog/api/artists.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.engine import Engine

from catalog.api.dependencies import get_writer
from catalog.db.engine import get_engine
from catalog.models.artists import ArtistIn, ArtistOut
from catalog.services import listing
from catalog.services.writer import EntityWriter

router = APIRouter(prefix="/artists", tags=["artists"])


@router.get("", response_model=List[ArtistOut])
def list_artists(
    genre: Optional[str] = Query(default=None, description="Case-insensitive exact match"),
    name: Optional[str] = Query(default=None, description="Case-insensitive exact match"),
    engine: Engine = Depends(get_engine),
) -> List[ArtistOut]:
    """
    Return artists, optionally filtered by genre and/or name (AND-combined).
    """
    rows = listing.list_artists(engine, genre=genre, name=name)
    return [ArtistOut(**row) for row in rows]


@router.post("", response_model=ArtistOut, status_code=status.HTTP_201_CREATED)
def create_artist(
    payload: ArtistIn,
    writer: EntityWriter = Depends(get_writer),
) -> ArtistOut:
    created = writer.create_artist(payload.model_dump())
    return ArtistOut(**created)
