# catalog/models/artists.py

from typing import Optional

from pydantic import BaseModel


class ArtistIn(BaseModel):
    # presence and emptiness are checked by the writer so they answer 400
    name: Optional[str] = None
    bio: Optional[str] = None
    genre: Optional[str] = None


class ArtistOut(BaseModel):
    id: str
    name: str
    bio: str
    genre: str

    class Config:
        from_attributes = True
