"""Tests for the HTTP API."""
import pytest
from fastapi.testclient import TestClient

from dreamhouse.api.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate_design(client):
    response = client.post("/api/designs/generate", json={
        "lot_size": 3600,
        "style_prompt": "victorian",
        "building_shape": "l-shape",
        "stories": 2,
    })
    assert response.status_code == 200

    body = response.json()
    assert body["style_name"] == "Victorian"
    geometry = body["geometry"]
    assert len(geometry["sections"]) == 2
    assert len(geometry["roofs"]) == 2
    assert geometry["windows"] == []

    section = geometry["sections"][0]
    assert len(section["vertices"]) == 24
    assert len(section["indices"]) == 36
    assert set(section["position"]) == {"x", "y", "z"}
    assert body["house_parameters"]["rooms"]


def test_generate_is_repeatable(client):
    payload = {"lot_size": 2500, "style_prompt": "modern"}
    first = client.post("/api/designs/generate", json=payload).json()
    second = client.post("/api/designs/generate", json=payload).json()
    assert first == second


@pytest.mark.parametrize("payload", [
    {"lot_size": 0, "style_prompt": "modern"},
    {"lot_size": -5, "style_prompt": "modern"},
    {"lot_size": 2500, "style_prompt": ""},
    {"lot_size": 2500, "style_prompt": "modern", "stories": 0},
])
def test_generate_rejects_invalid_input(client, payload):
    response = client.post("/api/designs/generate", json=payload)
    assert response.status_code == 422


def test_export_obj(client):
    response = client.post("/api/designs/export", json={
        "lot_size": 2500, "style_prompt": "victorian",
    })
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "house_design_export_victorian.obj" in response.headers["content-disposition"]
    assert "# Roof type: gabled" in response.text


def test_list_styles(client):
    body = client.get("/api/styles").json()

    assert [s["name"] for s in body["styles"]] == ["Brutalist", "Victorian", "Modern"]
    assert "l-shape" in body["shapes"]
    assert set(body["roof_types"]) == {"flat", "gabled"}
    assert body["version"] >= 1
