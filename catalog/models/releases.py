# catalog/models/releases.py

from typing import Optional

from pydantic import BaseModel


class ReleaseIn(BaseModel):
    title: Optional[str] = None
    release_date: Optional[str] = None
    status: Optional[str] = None
    genre: Optional[str] = None
    artist_id: Optional[str] = None


class ReleaseOut(BaseModel):
    id: str
    title: str
    release_date: str
    status: str
    genre: str
    artist_id: str

    class Config:
        from_attributes = True
