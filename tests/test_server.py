import pytest
from loguru import logger

from grid_pathfinder.config.models import AppConfig, GridConfig
from grid_pathfinder.server.app import create_app, SERVICE_EXTENSION_KEY


@pytest.fixture
def app():
    return create_app(AppConfig(grid=GridConfig(rows=5, cols=5)))


@pytest.fixture
def client(app):
    return app.test_client()


def _post(client, body):
    return client.post("/find-path", json=body)


def test_health_check(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": 200, "message": "Server is UP and Running"}


def test_find_path_open_grid(client):
    resp = _post(client, {"start": {"r": 0, "c": 0}, "end": {"r": 4, "c": 4}, "obstacles": []})
    assert resp.status_code == 200
    path = resp.get_json()["path"]
    assert len(path) == 9
    assert path[0] == {"r": 0, "c": 0}
    assert path[-1] == {"r": 4, "c": 4}


def test_find_path_routes_through_gap(client):
    obstacles = [{"r": r, "c": 2} for r in range(4)]
    resp = _post(client, {"start": {"r": 0, "c": 0}, "end": {"r": 0, "c": 4}, "obstacles": obstacles})
    assert resp.status_code == 200
    assert {"r": 4, "c": 2} in resp.get_json()["path"]


def test_no_path_is_a_normal_response(client):
    resp = _post(client, {"start": {"r": 0, "c": 0}, "end": {"r": 4, "c": 4},
                          "obstacles": [{"r": 0, "c": 0}]})
    assert resp.status_code == 200
    assert resp.get_json() == {"path": []}


def test_out_of_bounds_is_empty_path(client):
    resp = _post(client, {"start": {"r": 0, "c": 0}, "end": {"r": 10, "c": 10}})
    assert resp.status_code == 200
    assert resp.get_json() == {"path": []}


@pytest.mark.parametrize("body", [
    {},
    {"start": {"r": 0, "c": 0}},
    {"end": {"r": 0, "c": 0}},
    {"start": {"r": "0", "c": 0}, "end": {"r": 1, "c": 1}},
    {"start": {"r": 0}, "end": {"r": 1, "c": 1}},
    {"start": {"r": True, "c": 0}, "end": {"r": 1, "c": 1}},
    {"start": None, "end": {"r": 1, "c": 1}},
    [1, 2, 3],
])
def test_malformed_input_rejected(client, body):
    resp = _post(client, body)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid start or end coordinates"}


def test_non_json_body_rejected(client):
    resp = client.post("/find-path", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_integral_floats_accepted(client):
    resp = _post(client, {"start": {"r": 0.0, "c": 0.0}, "end": {"r": 0, "c": 2.0}})
    assert resp.status_code == 200
    assert resp.get_json()["path"] == [{"r": 0, "c": 0}, {"r": 0, "c": 1}, {"r": 0, "c": 2}]


def test_fractional_coordinates_give_empty_path(client):
    resp = _post(client, {"start": {"r": 0.5, "c": 0}, "end": {"r": 1, "c": 1}})
    assert resp.status_code == 200
    assert resp.get_json() == {"path": []}


def test_malformed_obstacles_are_dropped(client):
    obstacles = [{"r": 0, "c": 1}, {"r": "x", "c": 1}, 5, None, {"c": 3}, {"r": 1.5, "c": 0}]
    resp = _post(client, {"start": {"r": 0, "c": 0}, "end": {"r": 0, "c": 2}, "obstacles": obstacles})
    assert resp.status_code == 200
    path = resp.get_json()["path"]
    assert {"r": 0, "c": 1} not in path
    assert len(path) == 5


def test_non_list_obstacles_ignored(client):
    resp = _post(client, {"start": {"r": 0, "c": 0}, "end": {"r": 0, "c": 2}, "obstacles": {"r": 0, "c": 1}})
    assert resp.status_code == 200
    assert len(resp.get_json()["path"]) == 3


def test_internal_fault_maps_to_500(app, client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(app.extensions[SERVICE_EXTENSION_KEY], "plan_path", boom)
    resp = _post(client, {"start": {"r": 0, "c": 0}, "end": {"r": 1, "c": 1}})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Server error"}


def test_cors_headers(client):
    resp = client.get("/")
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_cors_preflight(client):
    resp = client.options(
        "/find-path",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST",
                 "Access-Control-Request-Headers": "content-type"},
    )
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]
    assert resp.headers["Access-Control-Allow-Headers"] == "content-type"


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="INFO")
    yield messages
    logger.remove(handler_id)


def test_request_log_keeps_query_string(client, log_messages):
    client.get("/?x=1")
    assert "GET /?x=1" in log_messages
    assert any(m.startswith("-> 200 GET /?x=1 (") for m in log_messages)


def test_request_log_without_query_string(client, log_messages):
    client.get("/")
    assert "GET /" in log_messages
    assert not any("/?" in m for m in log_messages)
