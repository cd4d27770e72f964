import pytest
from fastapi.testclient import TestClient

from catalog.db.engine import engine_for_url, get_engine
from catalog.db.ids import IdGenerator
from catalog.db.schema import create_schema
from catalog.main import create_app
from catalog.services.writer import EntityWriter


@pytest.fixture
def engine(tmp_path):
    engine = engine_for_url(f"sqlite:///{tmp_path / 'catalog.sqlite'}")
    yield engine
    engine.dispose()


@pytest.fixture
def schema(engine):
    create_schema(engine)
    return engine


@pytest.fixture
def writer(schema):
    return EntityWriter(schema, IdGenerator(schema))


@pytest.fixture
def client(engine):
    app = create_app()
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as client:
        yield client
