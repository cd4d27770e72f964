# catalog/api/dependencies.py

from fastapi import Depends
from sqlalchemy.engine import Engine

from catalog.db.engine import get_engine
from catalog.db.ids import IdGenerator, id_generator_for
from catalog.services.writer import EntityWriter


def get_id_generator(engine: Engine = Depends(get_engine)) -> IdGenerator:
    return id_generator_for(engine)


def get_writer(
    engine: Engine = Depends(get_engine),
    ids: IdGenerator = Depends(get_id_generator),
) -> EntityWriter:
    return EntityWriter(engine, ids)
