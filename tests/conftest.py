import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.api.deps import get_db_engine, get_view_cache
from app.cache import ViewCache
from app.db.engine import create_db_engine
from app.db.executor import EngineExecutor
from app.db.schema import customers, metadata
from app.main import app


class RecordingViews:
    """ViewInvalidator that remembers every revalidated path."""

    def __init__(self):
        self.paths = []

    def revalidate_path(self, path):
        self.paths.append(path)


class RecordingExecutor(EngineExecutor):
    """EngineExecutor that keeps the statements it ran."""

    def __init__(self, engine):
        super().__init__(engine)
        self.statements = []

    def execute(self, statement):
        self.statements.append(statement)
        return super().execute(statement)


class FailingExecutor:
    def __init__(self):
        self.statements = []

    def execute(self, statement):
        self.statements.append(statement)
        raise OperationalError(str(statement), {}, Exception("database is down"))


@pytest.fixture()
def engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path/'test.db'}")
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(
            customers.insert().values(
                id="c1",
                name="Evil Rabbit",
                email="evil@rabbit.com",
                image_url="/customers/evil-rabbit.png",
            )
        )
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    return RecordingExecutor(engine)


@pytest.fixture()
def failing_db():
    return FailingExecutor()


@pytest.fixture()
def views():
    return RecordingViews()


@pytest.fixture()
def view_cache():
    return ViewCache()


@pytest.fixture()
def client(engine, view_cache):
    app.dependency_overrides[get_db_engine] = lambda: engine
    app.dependency_overrides[get_view_cache] = lambda: view_cache
    yield TestClient(app)
    app.dependency_overrides.clear()
