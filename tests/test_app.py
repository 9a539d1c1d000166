def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "db": "ok"}


def test_unknown_route_uses_error_body(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_invalid_json_body(client):
    resp = client.post(
        "/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Validation failed"


def test_openapi_documents_routes(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert "/auth/register" in paths
    assert "/users/{id}" in paths
    assert "/articles" in paths
    assert "/posts" not in paths
    patch_body = paths["/users/{id}"]["patch"]["requestBody"]["content"]["application/json"]["schema"]
    assert set(patch_body["properties"]) == {"username", "email"}


def test_cors_headers(client):
    resp = client.get("/articles", headers={"Origin": "http://localhost:5173"})
    assert resp.headers["access-control-allow-origin"] in ("*", "http://localhost:5173")
