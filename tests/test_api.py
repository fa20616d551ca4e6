"""Tests for the editor HTTP API."""

import pytest
from fastapi.testclient import TestClient

from dataflow.api.main import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("EDITOR_CONFIG_DIR", str(tmp_path))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    with TestClient(app) as c:
        yield c


def add(client, label):
    return client.post("/nodes", json={"label": label}).json()


def test_health(client):
    assert client.get("/").json()["status"] == "running"

    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["controller_ready"] is True


def test_initial_state(client):
    body = client.get("/state").json()

    assert body["nodes"] == []
    assert body["edges"] == []
    assert body["validation"] == {"is_valid": False, "issues": ["At least 2 nodes required"]}
    assert body["stats"] == {"nodes": 0, "edges": 0}


def test_build_valid_pipeline(client):
    ingest = add(client, "ingest")
    transform = add(client, "transform")

    assert ingest["accepted"] is True
    assert ingest["id"] == "node-1"

    body = client.post(
        "/edges", json={"source": ingest["id"], "target": transform["id"]}
    ).json()

    assert body["accepted"] is True
    assert body["state"]["validation"] == {"is_valid": True, "issues": []}
    assert body["state"]["stats"] == {"nodes": 2, "edges": 1}
    edge = body["state"]["edges"][0]
    assert edge["source"] == "node-1"
    assert edge["target"] == "node-2"
    assert edge["animated"] is True


def test_rejected_edits_are_not_http_errors(client):
    blank = client.post("/nodes", json={"label": "  "})
    assert blank.status_code == 200
    assert blank.json()["accepted"] is False

    node = add(client, "a")
    loop = client.post("/edges", json={"source": node["id"], "target": node["id"]})
    assert loop.status_code == 200
    assert loop.json()["accepted"] is False
    assert loop.json()["state"]["stats"]["edges"] == 0

    assert client.delete("/edges/nope").json()["accepted"] is False
    assert client.post("/nodes/nope/select", json={}).json()["accepted"] is False


def test_malformed_body_is_422(client):
    assert client.post("/nodes", json={}).status_code == 422


def test_select_and_delete_selection(client):
    a = add(client, "A")["id"]
    b = add(client, "B")["id"]
    c = add(client, "C")["id"]
    client.post("/edges", json={"source": a, "target": b})
    client.post("/edges", json={"source": b, "target": c})

    client.post(f"/nodes/{b}/select", json={"selected": True})
    body = client.delete("/selection").json()

    assert body["accepted"] is True
    assert [n["id"] for n in body["state"]["nodes"]] == [a, c]
    assert body["state"]["edges"] == []


def test_delete_single_edge(client):
    a = add(client, "a")["id"]
    b = add(client, "b")["id"]
    edge_id = client.post("/edges", json={"source": a, "target": b}).json()["id"]

    body = client.delete(f"/edges/{edge_id}").json()

    assert body["accepted"] is True
    assert body["state"]["stats"] == {"nodes": 2, "edges": 0}


def test_move_layout_and_clear(client):
    a = add(client, "a")["id"]
    add(client, "b")

    moved = client.patch(f"/nodes/{a}/position", json={"x": 1, "y": 2}).json()
    assert moved["state"]["nodes"][0]["position"] == {"x": 1, "y": 2}

    laid_out = client.post("/layout").json()
    positions = [n["position"] for n in laid_out["state"]["nodes"]]
    assert positions == [{"x": 100, "y": 50}, {"x": 300, "y": 50}]

    cleared = client.post("/clear").json()
    assert cleared["state"]["stats"] == {"nodes": 0, "edges": 0}
    assert client.post("/layout").json()["accepted"] is False
    assert add(client, "again")["id"] == "node-1"
