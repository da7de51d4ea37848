import importlib

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rabat_landmarks.core.config import Settings
from rabat_landmarks.data.default_landmarks import DEFAULT_LANDMARKS
from rabat_landmarks.exceptions import BackingUnavailableError
import rabat_landmarks.main as main_module
from rabat_landmarks.main import create_app
from rabat_landmarks.storage import MemoryLandmarkStore

from conftest import SEEDED_COUNT, make_landmark


class FailingStore(MemoryLandmarkStore):
    """DBに到達できなくなった状態を模したストア"""

    def get_landmarks(self):
        raise BackingUnavailableError("could not connect to server: password=hunter2")

    def get_landmark_by_slug(self, slug):
        raise BackingUnavailableError("could not connect to server: password=hunter2")


@pytest.mark.parametrize("slug", [item["slug"] for item in DEFAULT_LANDMARKS])
def test_read_landmark(client, slug):
    response = client.get(f"/api/landmarks/{slug}")

    assert response.status_code == 200
    assert response.json()["slug"] == slug


def test_read_landmark_not_found(client):
    response = client.get("/api/landmarks/nonexistent-place")

    assert response.status_code == 404
    assert response.json() == {"message": "Landmark not found"}


def test_read_landmark_is_case_sensitive(client):
    assert client.get("/api/landmarks/Chellah").status_code == 404


def test_read_landmarks(client):
    response = client.get("/api/landmarks")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == SEEDED_COUNT
    slugs = [item["slug"] for item in body]
    assert len(set(slugs)) == len(slugs)


def test_read_landmarks_is_idempotent(client):
    first = client.get("/api/landmarks")
    second = client.get("/api/landmarks")
    assert first.json() == second.json()


def test_landmark_json_shape(client):
    body = client.get("/api/landmarks/hassan-tower").json()

    assert body == {
        "id": 1,
        "name": "Hassan Tower",
        "slug": "hassan-tower",
        "description": DEFAULT_LANDMARKS[0]["description"],
        "shortDescription": "Iconic 12th-century minaret of an incomplete mosque, standing as a symbol of Rabat.",
        "imageUrl": "https://upload.wikimedia.org/wikipedia/commons/thumb/e/e3/Tour_Hassan_Rabat.jpg/1280px-Tour_Hassan_Rabat.jpg",
        "location": "Avenue Hassan II, Rabat",
        "openingHours": "8:00 AM - 6:00 PM",
        "latitude": "34.0242",
        "longitude": "-6.8210",
        "vrModelUrl": "/vr/hassan-tower.gltf",
        "vrSceneConfig": {
            "cameraPosition": {"x": 0, "y": 1.6, "z": 5},
            "lightIntensity": 1.0,
            "environmentMap": "day",
        },
    }


def test_absent_optional_attributes_are_omitted(client, store):
    store.create_landmark(make_landmark())

    body = client.get("/api/landmarks/bab-el-had").json()
    assert "vrModelUrl" not in body
    assert "vrSceneConfig" not in body


def test_read_landmarks_empty(settings, empty_store):
    with TestClient(create_app(settings=settings, store=empty_store)) as client:
        response = client.get("/api/landmarks")
    assert response.status_code == 200
    assert response.json() == []


def test_store_failure_returns_generic_500(settings):
    with TestClient(create_app(settings=settings, store=FailingStore(seed=False))) as client:
        list_response = client.get("/api/landmarks")
        item_response = client.get("/api/landmarks/hassan-tower")

    assert list_response.status_code == 500
    assert list_response.json() == {"message": "Failed to fetch landmarks"}
    assert item_response.status_code == 500
    assert item_response.json() == {"message": "Failed to fetch landmark"}
    assert "hunter2" not in list_response.text + item_response.text


def test_unknown_route_uses_message_body(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_root_and_health(client, store):
    assert client.get("/").json() == {"message": "Welcome to Rabat Landmarks API!"}
    assert client.get("/health").json() == {
        "status": "ok",
        "backend": store.backend_name,
        "landmarks": SEEDED_COUNT,
    }


def test_lifespan_builds_memory_store_without_database_url(settings):
    app = create_app(settings=settings)
    with TestClient(app) as client:
        assert client.get("/health").json()["backend"] == "memory"
        assert len(client.get("/api/landmarks").json()) == SEEDED_COUNT


def test_lifespan_builds_database_store(tmp_path):
    settings = Settings(_env_file=None, DATABASE_URL=f"sqlite:///{tmp_path / 'landmarks.db'}")
    with TestClient(create_app(settings=settings)) as client:
        assert client.get("/health").json()["backend"] == "database"
        assert client.get("/api/landmarks/royal-palace").json()["vrSceneConfig"]["cameraPosition"]["z"] == 10



def test_unreachable_database_still_serves_landmarks(tmp_path):
    settings = Settings(_env_file=None, DATABASE_URL=f"sqlite:///{tmp_path / 'missing' / 'landmarks.db'}")
    with TestClient(create_app(settings=settings)) as client:
        response = client.get("/api/landmarks")
        health = client.get("/health").json()

    assert response.status_code == 200
    assert len(response.json()) == SEEDED_COUNT
    assert health["backend"] == "memory"


def test_cors_allows_configured_origin(client):
    response = client.get("/api/landmarks", headers={"Origin": "http://localhost:5173"})
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_importing_main_does_not_build_an_app(monkeypatch):
    calls = []
    monkeypatch.setattr("rabat_landmarks.core.config.get_settings", lambda: calls.append("get_settings"))
    try:
        importlib.reload(main_module)
        assert calls == []
        assert not hasattr(main_module, "app")
    finally:
        monkeypatch.undo()
        importlib.reload(main_module)


def test_create_app_works_as_uvicorn_factory(monkeypatch, settings):
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)

    app = main_module.create_app()

    assert isinstance(app, FastAPI)
    with TestClient(app) as client:
        assert client.get("/health").json()["backend"] == "memory"
