# tests/test_main.py

from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def test_root_banner(client):
    res = client.get("/")

    assert res.status_code == 200
    assert res.text == "GLPAAC API is running"


def test_test_db_reports_timestamp(client):
    res = client.get("/api/test-db")

    assert res.status_code == 200
    assert res.json()["success"] is True
    assert res.json()["timestamp"]


def test_test_db_failure(client):
    with patch("aac_server.main.check_connection", side_effect=OperationalError("SELECT", {}, Exception("down"))):
        res = client.get("/api/test-db")

    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Database connection failed"}


def test_cors_is_permissive(client):
    res = client.options(
        "/api/auth/login",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"}
    )

    assert res.status_code == 200
    assert "access-control-allow-origin" in res.headers
