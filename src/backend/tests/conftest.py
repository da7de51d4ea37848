import pytest
from fastapi.testclient import TestClient

from rabat_landmarks.core.config import Settings
from rabat_landmarks.db.session import create_db_engine
from rabat_landmarks.main import create_app
from rabat_landmarks.storage import DatabaseLandmarkStore, MemoryLandmarkStore

SEEDED_COUNT = 10

ENV_VARS = (
    "DATABASE_URL",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
    "DB_CONNECT_TIMEOUT",
    "LOG_LEVEL",
    "CORS_ORIGINS",
)


def make_landmark(**overrides) -> dict:
    data = {
        "name": "Bab el Had",
        "slug": "bab-el-had",
        "description": "Almohad gate on the western wall of the Rabat medina.",
        "short_description": "Gate on the western medina wall.",
        "image_url": "https://example.org/bab-el-had.jpg",
        "location": "Place Bab El Had, Rabat",
        "opening_hours": "Open 24 hours",
        "latitude": "34.0206",
        "longitude": "-6.8419",
    }
    data.update(overrides)
    return data


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def sqlite_engine():
    engine = create_db_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture(params=["memory", "database"])
def store(request, sqlite_engine):
    if request.param == "memory":
        return MemoryLandmarkStore()
    store = DatabaseLandmarkStore(sqlite_engine)
    store.initialize()
    return store


@pytest.fixture(params=["memory", "database"])
def empty_store(request, sqlite_engine):
    if request.param == "memory":
        return MemoryLandmarkStore(seed=False)
    store = DatabaseLandmarkStore(sqlite_engine)
    store.initialize(seed=False)
    return store


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as client:
        yield client
