import pytest
from sqlalchemy.exc import OperationalError

from app import main


def test_preflight_from_allowed_origin(client):
    response = client.options(
        "/api/activities",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_frontend_url_is_allowed(client):
    response = client.get("/api/activities", headers={"Origin": "https://ecoaction.example.com"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://ecoaction.example.com"


def test_preflight_from_unknown_origin_is_refused(client):
    response = client.options(
        "/api/activities",
        headers={
            "Origin": "https://evil.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_requests_without_origin_are_allowed(client):
    response = client.get("/api/activities")
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_startup_exits_when_database_is_unreachable(monkeypatch):
    def fail():
        raise OperationalError("CONNECT", {}, Exception("connection refused"))

    monkeypatch.setattr(main, "create_db_and_tables", fail)

    with pytest.raises(SystemExit) as exc_info:
        main.init_storage()
    assert exc_info.value.code == 1


def test_preflight_for_update_methods_is_refused(client):
    for method in ("PUT", "DELETE"):
        response = client.options(
            "/api/activities",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": method,
            },
        )
        assert response.status_code == 400
