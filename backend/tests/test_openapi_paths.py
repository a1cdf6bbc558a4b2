from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import app


client = TestClient(app)


def test_openapi_lists_user_lookup():
    resp = client.get("/openapi.json")
    assert resp.status_code == 200
    paths = resp.json()["paths"]
    assert "/users/{user_id}" in paths
    assert set(paths["/users/{user_id}"]) == {"get"}
    assert {"200", "400", "404", "500"} <= set(paths["/users/{user_id}"]["get"]["responses"])


def test_user_lookup_is_read_only():
    for method in ("post", "put", "patch", "delete"):
        resp = client.request(method.upper(), "/users/507f1f77bcf86cd799439012")
        assert resp.status_code == 405
        assert resp.json() == {"error": "Method Not Allowed"}
