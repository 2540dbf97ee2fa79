from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from userauth.application.use_cases.auth.login_or_register import (
    AuthOutcome,
    AuthOutcomeKind,
    LoginOrRegisterUseCase,
)
from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import AuthenticationError
from userauth.interfaces.http.controllers.auth_controller import AuthController
from userauth.shared.errors import InternalError
from userauth.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _user() -> User:
    return User(id="user-1", name="A", email="a@x.com", password_hash="hash")


class StubLoginOrRegister:
    def __init__(self, *, kind: AuthOutcomeKind | None = None, error: Exception | None = None) -> None:
        self.kind = kind
        self.error = error
        self.calls: list[tuple[str, str, str | None]] = []

    async def execute(self, email: str, password: str, name: str | None = None) -> AuthOutcome:
        self.calls.append((email, password, name))
        if self.error is not None:
            raise self.error
        return AuthOutcome(kind=self.kind, user=_user(), token="token123")


def _mount(flask_app: Flask, stub: object) -> None:
    controller = AuthController(
        login_or_register_use_case=cast(LoginOrRegisterUseCase, stub),
    )
    flask_app.register_blueprint(controller.as_blueprint())


def test_registration_returns_201_with_token(flask_app: Flask) -> None:
    stub = StubLoginOrRegister(kind=AuthOutcomeKind.REGISTERED)
    _mount(flask_app, stub)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/loginOrRegister",
            json={"email": "a@x.com", "password": "p1", "name": "A"},
        )

    assert response.status_code == 201
    assert response.get_json() == {
        "success": True,
        "message": "User registered and logged in successfully",
        "data": {"token": "token123"},
    }
    assert stub.calls == [("a@x.com", "p1", "A")]


def test_login_returns_200_with_token(flask_app: Flask) -> None:
    _mount(flask_app, StubLoginOrRegister(kind=AuthOutcomeKind.LOGGED_IN))

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/loginOrRegister", json={"email": "a@x.com", "password": "p1"}
        )

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["message"] == "Login successful"
    assert payload["data"] == {"token": "token123"}


def test_wrong_password_returns_401(flask_app: Flask) -> None:
    _mount(flask_app, StubLoginOrRegister(error=AuthenticationError()))

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/loginOrRegister", json={"email": "a@x.com", "password": "nope"}
        )

    assert response.status_code == 401
    assert response.get_json() == {
        "success": False,
        "message": "Invalid credentials",
        "data": None,
    }


def test_internal_failure_returns_500_with_message(flask_app: Flask) -> None:
    _mount(flask_app, StubLoginOrRegister(error=InternalError("store unavailable")))

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/loginOrRegister", json={"email": "a@x.com", "password": "p1"}
        )

    assert response.status_code == 500
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["message"] == "store unavailable"


@pytest.mark.parametrize(
    "body",
    [{"email": "a@x.com"}, {"password": "p1"}, {"email": "", "password": "p1"}, {"email": 5, "password": "p1"}],
)
def test_invalid_payload_returns_400(flask_app: Flask, body: dict) -> None:
    use_case = MagicMock()
    _mount(flask_app, use_case)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/loginOrRegister", json=body)

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["data"]["fields"]
    use_case.execute.assert_not_called()


def test_unknown_route_uses_envelope(flask_app: Flask) -> None:
    _mount(flask_app, MagicMock())

    with flask_app.test_client() as client:
        response = client.get("/api/auth/nope")

    assert response.status_code == 404
    assert response.get_json()["success"] is False
