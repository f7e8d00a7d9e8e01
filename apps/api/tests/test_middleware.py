"""Tests for the request pipeline: error boundary, auth gate and request logger."""

import logging

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from userapi.config import Settings
from userapi.main import create_app
from userapi.middleware import MIDDLEWARE_CHAIN, auth_gate, error_boundary, request_logger, setup_middleware
from userapi.services import init_services

MIDDLEWARE_LOGGER = "userapi.middleware"


@pytest.mark.unit
def test_chain_order() -> None:
    assert MIDDLEWARE_CHAIN == (error_boundary, auth_gate, request_logger)


@pytest.mark.unit
@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": ""},
        {"Authorization": "   "},
        {"Authorization": "test-secret"},
        {"Authorization": "Basic dGVzdDp0ZXN0"},
        {"Authorization": "bearer test-secret"},
    ],
)
def test_missing_or_malformed_token(client: TestClient, headers: dict[str, str]) -> None:
    response = client.get("/users", headers=headers)

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized: Missing or invalid token."}


@pytest.mark.unit
@pytest.mark.parametrize("token", ["wrong", "TEST-SECRET", "test-secret-but-longer"])
def test_wrong_token(client: TestClient, token: str) -> None:
    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized: Invalid token."}


@pytest.mark.unit
def test_token_is_trimmed(client: TestClient) -> None:
    response = client.get("/users", headers={"Authorization": "Bearer   test-secret  "})

    assert response.status_code == 200


@pytest.mark.unit
def test_auth_applies_to_unknown_routes(client: TestClient) -> None:
    assert client.get("/nowhere").status_code == 401


@pytest.mark.unit
def test_default_secret() -> None:
    client = TestClient(create_app(Settings(_env_file=None)))

    response = client.get("/users", headers={"Authorization": "Bearer mysecrettoken"})

    assert response.status_code == 200


@pytest.mark.unit
def test_request_logger_records_status(
    client: TestClient, auth_headers: dict[str, str], caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=MIDDLEWARE_LOGGER)

    client.post("/users", json={"name": "Alice", "email": "alice@x.com"}, headers=auth_headers)
    client.get("/users/9", headers=auth_headers)

    messages = [r.getMessage() for r in caplog.records if r.name == MIDDLEWARE_LOGGER]
    assert "POST /users => 201" in messages
    assert "GET /users/9 => 404" in messages


@pytest.mark.unit
def test_rejected_requests_are_not_logged(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=MIDDLEWARE_LOGGER)

    client.get("/users", headers={"Authorization": "Bearer wrong"})

    assert not [r for r in caplog.records if "=>" in r.getMessage()]


@pytest.mark.unit
def test_error_boundary_hides_handler_failures(
    app: FastAPI, auth_headers: dict[str, str], caplog: pytest.LogCaptureFixture
) -> None:
    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("secret internals")

    caplog.set_level(logging.ERROR, logger=MIDDLEWARE_LOGGER)
    response = TestClient(app).get("/boom", headers=auth_headers)

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"error": "Internal server error."}
    assert any("secret internals" in r.getMessage() for r in caplog.records)


@pytest.mark.unit
def test_error_boundary_catches_interceptor_failures(settings: Settings) -> None:
    async def broken(request: Request, call_next):
        raise ValueError("interceptor broke")

    app = FastAPI()
    init_services(app, settings)
    setup_middleware(app, chain=(error_boundary, broken, request_logger))

    @app.get("/ping")
    async def ping() -> dict:
        return {"pong": True}

    response = TestClient(app).get("/ping")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error."}


@pytest.mark.unit
def test_docs_enabled_in_development(auth_headers: dict[str, str]) -> None:
    client = TestClient(create_app(Settings(_env_file=None, environment="development", auth_token="test-secret")))

    assert client.get("/docs").status_code == 401
    assert client.get("/docs", headers=auth_headers).status_code == 200
    assert client.get("/openapi.json", headers=auth_headers).json()["info"]["title"] == "user-api"


@pytest.mark.unit
def test_docs_disabled_outside_development(client: TestClient, auth_headers: dict[str, str]) -> None:
    assert client.get("/docs", headers=auth_headers).status_code == 404
    assert client.get("/openapi.json", headers=auth_headers).status_code == 404
