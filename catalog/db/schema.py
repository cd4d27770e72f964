# catalog/db/schema.py

import logging

from sqlalchemy import Column, ForeignKey, MetaData, Table, Text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

metadata = MetaData()

artists = Table(
    "artists",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("bio", Text, nullable=False),
    Column("genre", Text, nullable=False),
)

releases = Table(
    "releases",
    metadata,
    Column("id", Text, primary_key=True),
    Column("title", Text, nullable=False),
    Column("release_date", Text, nullable=False),
    Column("status", Text, nullable=False),
    Column("genre", Text, nullable=False),
    Column(
        "artist_id",
        Text,
        ForeignKey("artists.id", ondelete="CASCADE"),
        nullable=False,
    ),
)

ARTIST_COLUMNS = ("id", "name", "bio", "genre")
RELEASE_COLUMNS = ("id", "title", "release_date", "status", "genre", "artist_id")


def create_schema(engine: Engine) -> None:
    metadata.create_all(engine, checkfirst=True)


def drop_schema(engine: Engine) -> None:
    # releases first: it references artists
    releases.drop(engine, checkfirst=True)
    artists.drop(engine, checkfirst=True)


def drop_schema_quietly(engine: Engine) -> bool:
    """
    Best-effort teardown. Returns False (after logging) if the store refused.
    """
    try:
        drop_schema(engine)
    except SQLAlchemyError:
        logger.exception("Schema teardown failed")
        return False
    return True
