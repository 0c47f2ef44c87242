"""
Tests for the read-only HTTP surface, served from a manager built with fake collaborators.
"""

import pytest
from fastapi.testclient import TestClient

import api
from review_engine import manager as manager_module
from review_engine.errors import ResourceLoadFailure

from conftest import make_toolkit


@pytest.fixture
def client(monkeypatch, manager):
	manager.initialize()
	monkeypatch.setattr(api, "MANAGER", manager)
	return TestClient(api.app)  # no context manager: startup hook is not run


def test_health(client):
	body = client.get("/health").json()
	assert body["status"] == "ok"
	assert body["engine_ready"] is True
	assert body["summary"]["reviews"] == 6


def test_not_ready_returns_503(monkeypatch):
	monkeypatch.setattr(api, "MANAGER", None)
	client = TestClient(api.app)
	assert client.get("/reviews").status_code == 503
	assert client.get("/health").json()["engine_ready"] is False


def test_list_reviews_with_filters(client):
	body = client.get("/reviews").json()
	assert body["count"] == 6
	body = client.get("/reviews", params={"language": "es"}).json()
	assert [r["id"] for r in body["results"]] == [1, 4]
	body = client.get("/reviews", params={"movie": "Nope", "language": "en"}).json()
	assert [r["id"] for r in body["results"]] == [0, 2]


def test_get_review(client):
	body = client.get("/reviews/1").json()
	assert body["movie"] == "Roma"
	assert body["translated_text"] == "I liked it a lot "
	assert body["sentiment"] is None
	assert client.get("/reviews/42").status_code == 404


def test_search(client):
	body = client.get("/search", params={"q": "great"}).json()
	assert body["count"] == 2
	assert [r["id"] for r in body["results"]] == [0, 2]
	assert client.get("/search", params={"q": "zzz"}).json()["count"] == 0
	assert client.get("/search", params={"q": ""}).status_code == 422


def test_movies(client):
	movies = {item["key"]: item["count"] for item in client.get("/movies").json()}
	assert movies == {"Nope": 2, "Roma": 2, "Arrival": 2}
	body = client.get("/movies/Roma/reviews").json()
	assert body["key"] == "Roma"
	assert [r["id"] for r in body["results"]] == [1, 4]
	assert client.get("/movies/Unknown/reviews").status_code == 404


def test_actors_with_fuzzy_lookup(client):
	actors = {item["key"]: item["count"] for item in client.get("/actors").json()}
	assert actors == {"Daniel Kaluuya": 1, "Keke Palmer": 2}
	body = client.get("/actors/keke palmer/reviews").json()
	assert body["key"] == "Keke Palmer"
	assert body["count"] == 2  # duplicate registration is preserved
	assert client.get("/actors/Meryl Streep/reviews").status_code == 404


def test_languages(client):
	languages = {item["key"]: item["count"] for item in client.get("/languages").json()}
	assert languages == {"en": 3, "es": 2}
	assert client.get("/languages/es/reviews").json()["count"] == 2
	assert client.get("/languages/fr/reviews").status_code == 404


def test_startup_aborts_when_corpus_is_missing(monkeypatch, tmp_path):
	monkeypatch.setattr(manager_module, "_MANAGER", None)
	monkeypatch.setattr(manager_module.settings, "REVIEW_CORPUS_PATH", str(tmp_path / "missing.json"))
	monkeypatch.setattr(manager_module, "load_default_toolkit", lambda **kwargs: make_toolkit())
	monkeypatch.setattr(api, "MANAGER", None)
	with pytest.raises(ResourceLoadFailure):
		with TestClient(api.app):  # runs the startup hook
			pass
	assert api.MANAGER is None
