# catalog/api/maintenance.py
"""
Schema setup/teardown endpoints for test harnesses.

Mounted only when CATALOG_SCHEMA_ROUTES is enabled.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from catalog.api.dependencies import get_id_generator
from catalog.db.engine import get_engine
from catalog.db.ids import IdGenerator
from catalog.db.schema import create_schema, drop_schema

logger = logging.getLogger(__name__)

router = APIRouter(tags=["maintenance"])


@router.post("/test-setup")
def test_setup(
    engine: Engine = Depends(get_engine),
    ids: IdGenerator = Depends(get_id_generator),
) -> dict:
    create_schema(engine)
    ids.reset()
    return {"success": True}


@router.post("/test-cleanup")
def test_cleanup(
    engine: Engine = Depends(get_engine),
    ids: IdGenerator = Depends(get_id_generator),
):
    try:
        drop_schema(engine)
    except SQLAlchemyError as exc:
        logger.exception("Schema cleanup failed")
        return JSONResponse(status_code=500, content={"info": str(exc)})
    finally:
        ids.reset()
    return {"success": True}
