# catalog/services/listing.py
"""
Read side of the catalog: filtered listings and single-row lookups.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.sql.schema import Table

from catalog.db.query import ListQuery
from catalog.db.schema import ARTIST_COLUMNS, RELEASE_COLUMNS, artists, releases


def _fetch_all(engine: Engine, query: ListQuery) -> List[dict]:
    with engine.connect() as conn:
        rows = conn.execute(query.statement()).mappings().all()
    return [dict(row) for row in rows]


def _fetch_by_id(engine: Engine, table: Table, columns, entity_id: str) -> Optional[dict]:
    with engine.connect() as conn:
        stmt = select(*(table.c[name] for name in columns)).where(table.c.id == entity_id)
        row = conn.execute(stmt).mappings().first()
    return dict(row) if row is not None else None


def artist_query(genre: Optional[str] = None, name: Optional[str] = None) -> ListQuery:
    return (
        ListQuery(artists, ARTIST_COLUMNS)
        .where_equals("genre", genre, case_insensitive=True)
        .where_equals("name", name, case_insensitive=True)
    )


def release_query(
    artist_id: Optional[str] = None,
    genre: Optional[str] = None,
    status: Optional[str] = None,
) -> ListQuery:
    return (
        ListQuery(releases, RELEASE_COLUMNS)
        .where_equals("artist_id", artist_id)
        .where_equals("genre", genre, case_insensitive=True)
        .where_equals("status", status, case_insensitive=True)
    )


def list_artists(
    engine: Engine, genre: Optional[str] = None, name: Optional[str] = None
) -> List[dict]:
    return _fetch_all(engine, artist_query(genre=genre, name=name))


def list_releases(
    engine: Engine,
    artist_id: Optional[str] = None,
    genre: Optional[str] = None,
    status: Optional[str] = None,
) -> List[dict]:
    return _fetch_all(
        engine, release_query(artist_id=artist_id, genre=genre, status=status)
    )


def get_artist(engine: Engine, artist_id: str) -> Optional[dict]:
    return _fetch_by_id(engine, artists, ARTIST_COLUMNS, artist_id)


def get_release(engine: Engine, release_id: str) -> Optional[dict]:
    return _fetch_by_id(engine, releases, RELEASE_COLUMNS, release_id)
