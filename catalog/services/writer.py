# catalog/services/writer.py
"""
Entity creation: validate, allocate an id, insert, read back.

Validation and the parent-artist check run before anything is written.
The read-back after the insert catches writes the store accepted without
raising but did not keep.
"""

import logging
from typing import Any, Callable, Mapping, Optional, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.sql.schema import Table

from catalog.db.ids import IdGenerator
from catalog.db.schema import artists, releases
from catalog.errors import PersistenceError, ReferenceNotFoundError, ValidationError
from catalog.services import listing

logger = logging.getLogger(__name__)

ARTIST_FIELDS = ("name", "bio", "genre")
RELEASE_FIELDS = ("title", "release_date", "status", "genre", "artist_id")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def require_fields(fields: Mapping[str, Any], required: Sequence[str]) -> dict:
    """
    Return the required values, untouched, or raise ValidationError.
    """
    if any(_is_blank(fields.get(name)) for name in required):
        raise ValidationError(f"All fields ({', '.join(required)}) are required")
    return {name: fields[name] for name in required}


class EntityWriter:
    def __init__(self, engine: Engine, ids: IdGenerator):
        self.engine = engine
        self.ids = ids

    def _insert_and_read_back(
        self,
        table: Table,
        prefix: str,
        values: dict,
        read_back: Callable[[Engine, str], Optional[dict]],
        label: str,
    ) -> dict:
        new_id = None
        try:
            new_id = self.ids.next_id(table, prefix)
            with self.engine.begin() as conn:
                conn.execute(table.insert().values(id=new_id, **values))
            created = read_back(self.engine, new_id)
        except IntegrityError as exc:
            # lost a race for the id: rescan the table on the next call
            self.ids.sequence(table, prefix).reset()
            logger.exception("%s insert rejected for id %s", label, new_id)
            raise PersistenceError(f"{label} insert failed", info=str(exc)) from exc
        except SQLAlchemyError as exc:
            logger.exception("%s insert failed for id %s", label, new_id)
            raise PersistenceError(f"{label} insert failed", info=str(exc)) from exc

        if created is None:
            logger.error("%s %s missing after insert", label, new_id)
            raise PersistenceError(f"{label} insert failed")

        logger.info("Created %s %s", label.lower(), new_id)
        return created

    def create_artist(self, fields: Mapping[str, Any]) -> dict:
        values = require_fields(fields, ARTIST_FIELDS)
        return self._insert_and_read_back(
            artists, "artist", values, listing.get_artist, "Artist"
        )

    def create_release(self, fields: Mapping[str, Any]) -> dict:
        values = require_fields(fields, RELEASE_FIELDS)

        artist_id = values["artist_id"]
        try:
            parent = listing.get_artist(self.engine, artist_id)
        except SQLAlchemyError as exc:
            logger.exception("Artist lookup failed for %s", artist_id)
            raise PersistenceError("Unexpected error", info=str(exc)) from exc
        if parent is None:
            raise ReferenceNotFoundError(f"Artist with id '{artist_id}' does not exist")

        return self._insert_and_read_back(
            releases, "release", values, listing.get_release, "Release"
        )
