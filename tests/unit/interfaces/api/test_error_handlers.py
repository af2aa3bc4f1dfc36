"""Tests for the FastAPI error mapping.

A malformed request must surface as a 400, never as a 500.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from meridian.interfaces.api.codec import decode_payload
from meridian.interfaces.api.error_handlers import register_exception_handlers
from meridian.interfaces.api.types import Config, NewUser, User


@pytest.fixture
def api_client() -> TestClient:
    """Minimal app wired with the error handlers."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/users")
    async def create_user(new_user: NewUser) -> User:
        return User(name=new_user.name, is_admin=new_user.admin)

    @app.put("/config")
    async def put_config(payload: dict) -> dict:
        config = decode_payload(Config, payload)
        return {"sections": [k for k, v in vars(config.to_dto()).items() if v is not None]}

    @app.get("/boom")
    async def boom() -> dict:
        raise RuntimeError("/srv/secret/path exploded")

    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Tests for register_exception_handlers."""

    @pytest.mark.unit
    def test_valid_request(self, api_client: TestClient) -> None:
        response = api_client.post("/users", json={"name": "alice", "password": "p", "admin": True})
        assert response.status_code == 200
        assert response.json() == {"name": "alice", "is_admin": True}

    @pytest.mark.unit
    def test_request_validation_is_client_error(self, api_client: TestClient) -> None:
        """FastAPI body validation failures map to 400."""
        response = api_client.post("/users", json={"name": "alice"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid payload"
        assert {tuple(d["loc"]) for d in body["details"]} == {("body", "password"), ("body", "admin")}

    @pytest.mark.unit
    def test_decode_error_is_client_error(self, api_client: TestClient) -> None:
        """PayloadDecodeError from the codec maps to 400 with field details."""
        response = api_client.put("/config", json={"ydns": {"host": "h"}})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid payload"
        assert ["ydns", "username"] in [d["loc"] for d in body["details"]]

    @pytest.mark.unit
    def test_empty_patch_is_accepted(self, api_client: TestClient) -> None:
        response = api_client.put("/config", json={})
        assert response.status_code == 200
        assert response.json() == {"sections": []}

    @pytest.mark.unit
    def test_unexpected_error_is_sanitized(self, api_client: TestClient) -> None:
        """Server errors return a generic message without internal details."""
        response = api_client.get("/boom")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
