from fastapi.testclient import TestClient

from translation_admin.main import create_app
from translation_admin.store import InMemoryStore


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_is_echoed(client):
    response = client.get("/api/modules", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert client.get("/api/modules").headers["X-Request-ID"]


def test_malformed_body_is_400(client):
    response = client.post(
        "/api/modules", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert body["details"]["errors"]


def test_unexpected_error_is_opaque_500():
    class BrokenStore(InMemoryStore):
        def find(self, model, **filters):
            raise RuntimeError("database password is hunter2")

    with TestClient(create_app(store=BrokenStore()), raise_server_exceptions=False) as client:
        response = client.get("/api/modules")

    assert response.status_code == 500
    assert response.json() == {
        "error_code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "details": {},
    }


def test_upload_route_is_not_a_module(client):
    # GET on the upload path lists translations of a module called "upload"
    response = client.get("/api/translations/upload")

    assert response.status_code == 200
    assert response.json() == []


def test_create_translation_scenario(empty_client):
    assert empty_client.post("/api/modules", json={"id": "hr", "name": "HR"}).status_code == 201
    assert (
        empty_client.post(
            "/api/sections", json={"id": "onboard", "name": "Onboard", "module": "hr"}
        ).status_code
        == 201
    )

    response = empty_client.post(
        "/api/translations",
        json={"module": "hr", "translation_key": "onboard", "en": "Welcome"},
    )
    assert response.status_code == 201
    assert response.json()["active"] is True
    assert response.json()["de"] == ""

    response = empty_client.post(
        "/api/translations",
        json={"module": "hr", "translation_key": "onboard", "en": "Welcome again"},
    )
    assert response.status_code == 409
    assert response.json()["error_code"] == "TRANSLATION_EXISTS"


def test_cascading_delete_order(empty_client):
    empty_client.post("/api/modules", json={"id": "hr", "name": "HR"})
    empty_client.post("/api/sections", json={"id": "onboard", "name": "Onboard", "module": "hr"})
    translation = empty_client.post(
        "/api/translations",
        json={"module": "hr", "translation_key": "onboard", "en": "Welcome"},
    ).json()

    assert empty_client.delete("/api/modules/hr").status_code == 409
    assert empty_client.delete("/api/sections/onboard").status_code == 409
    assert empty_client.delete(f"/api/translations/{translation['id']}").status_code == 200
    assert empty_client.delete("/api/sections/onboard").status_code == 200
    assert empty_client.delete("/api/modules/hr").status_code == 200
    assert empty_client.get("/api/modules").json() == []
