async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "app": "StreetEats API", "env": "test"}


async def test_unknown_route_uses_error_envelope(client):
    resp = await client.get("/api/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"error": {"code": "NOT_FOUND", "message": "Resource not found"}}


async def test_invalid_body_uses_error_envelope(client):
    resp = await client.post("/api/supplier/shop-status", json={"status": True})
    assert resp.status_code == 422
    error = resp.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "phone" in error["details"]
