# catalog/db/ids.py
"""
Human-readable sequential identifiers ("artist_1", "release_42").

The numeric suffix is compared as an integer, never as text: after
"artist_9" comes "artist_10". Each table gets an in-process counter that is
seeded by one scan of the existing identifiers and then incremented under a
lock, so requests served by the same process never receive the same id.
Before each increment the counter catches up with the highest suffix already
stored (one MAX aggregate), so rows written by other processes are never
undercut. Two processes racing on the same number still collide; the primary
key turns that into a failed insert.
"""

import logging
import threading
from functools import lru_cache
from typing import Dict, Optional

from sqlalchemy import Integer, cast, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.sql.schema import Table

logger = logging.getLogger(__name__)

SEPARATOR = "_"


def parse_suffix(identifier: str) -> Optional[int]:
    """
    Integer after the first separator, or None if the identifier is malformed.

    >>> parse_suffix("artist_10")
    10
    >>> parse_suffix("artist_x") is None
    True
    """
    _, sep, suffix = identifier.partition(SEPARATOR)
    if not sep or not suffix.isdigit() or not suffix.isascii():
        return None
    return int(suffix)


def format_id(prefix: str, number: int) -> str:
    return f"{prefix}{SEPARATOR}{number}"


class IdSequence:
    """Monotonic counter for one table."""

    def __init__(self, engine: Engine, table: Table, prefix: str):
        self.engine = engine
        self.table = table
        self.prefix = prefix
        self._last: Optional[int] = None
        self._lock = threading.Lock()

    def _scan_max_suffix(self) -> int:
        highest = 0
        with self.engine.connect() as conn:
            for identifier in conn.execute(select(self.table.c.id)).scalars():
                number = parse_suffix(identifier)
                if number is None:
                    logger.warning(
                        "Skipping malformed id %r in table %s", identifier, self.table.name
                    )
                    continue
                highest = max(highest, number)
        return highest

    def _stored_max_suffix(self) -> int:
        # well-formed "<prefix>_<digits>" ids only
        suffix = func.substr(self.table.c.id, len(self.prefix) + len(SEPARATOR) + 1)
        stmt = select(func.max(cast(suffix, Integer))).where(
            self.table.c.id.startswith(self.prefix + SEPARATOR, autoescape=True),
            suffix.regexp_match("^[0-9]+$"),
        )
        with self.engine.connect() as conn:
            return conn.execute(stmt).scalar() or 0

    def next_id(self) -> str:
        with self._lock:
            if self._last is None:
                self._last = self._scan_max_suffix()
                logger.info(
                    "Seeded id sequence for %s at %s", self.table.name, self._last
                )
            else:
                self._last = max(self._last, self._stored_max_suffix())
            self._last += 1
            return format_id(self.prefix, self._last)

    def reset(self) -> None:
        with self._lock:
            self._last = None


class IdGenerator:
    """One IdSequence per table, sharing a single engine."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._sequences: Dict[str, IdSequence] = {}
        self._lock = threading.Lock()

    def sequence(self, table: Table, prefix: str) -> IdSequence:
        with self._lock:
            seq = self._sequences.get(table.name)
            if seq is None:
                seq = IdSequence(self.engine, table, prefix)
                self._sequences[table.name] = seq
            return seq

    def next_id(self, table: Table, prefix: str) -> str:
        return self.sequence(table, prefix).next_id()

    def reset(self) -> None:
        with self._lock:
            sequences = list(self._sequences.values())
        for seq in sequences:
            seq.reset()


@lru_cache(maxsize=8)
def id_generator_for(engine: Engine) -> IdGenerator:
    return IdGenerator(engine)
