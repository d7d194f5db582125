def test_health_ok(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["db"] is True


def _preflight(client, method):
    return client.options(
        "/carts",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": method,
            "Access-Control-Request-Headers": "Authorization",
        },
    )


def test_cors_preflight_allows_only_served_methods(client):
    res = _preflight(client, "POST")
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert _preflight(client, "DELETE").status_code == 400
    assert _preflight(client, "PUT").status_code == 400
