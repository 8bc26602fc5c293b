"""Tests for the account endpoints."""

from datetime import timedelta
from unittest.mock import Mock

import jwt
import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from notebook.domain.shared.time import utc_now
from notebook.presentation.api.app import create_app
from notebook.presentation.api.dependencies import get_account_service
from notebook_auth import ConfigurationError, IdentityData, JwtConfig, TokenService

from tests.shared.fixtures.factories import TEST_JWT_SECRET

INVALID_PAYLOAD = {"success": False, "errors": ["Invalid payload"]}
INVALID_AUTH = {"success": False, "errors": ["Invalid authentication request"]}
INVALID_TOKEN = {"success": False, "errors": ["Invalid or expired token"]}


class TestRegister:
    """Tests for POST /api/v1/accounts/register."""

    def test_register_success(self, test_client: TestClient, registration_data, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/accounts/register",
            json=registration_data,
        )

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"success", "token"}
        assert data["success"] is True

        claims = jwt.decode(data["token"], TEST_JWT_SECRET, algorithms=["HS256"])
        assert claims["sub"] == "test@example.com"
        assert claims["email"] == "test@example.com"
        assert claims["exp"] - claims["iat"] == 3 * 60 * 60

    def test_capitalised_route_is_accepted(
        self, test_client: TestClient, registration_data, api_v1_prefix
    ):
        response = test_client.post(
            f"{api_v1_prefix}/accounts/Register",
            json=registration_data,
        )

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_snake_case_names_are_accepted(self, test_client: TestClient, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/accounts/register",
            json={
                "email": "snake@example.com",
                "password": "SecurePassword123!",
                "first_name": "Ada",
                "last_name": "Lovelace",
            },
        )

        assert response.status_code == 200

    def test_duplicate_email_is_rejected(
        self, test_client: TestClient, registration_data, api_v1_prefix
    ):
        url = f"{api_v1_prefix}/accounts/register"
        assert test_client.post(url, json=registration_data).status_code == 200

        second = dict(registration_data, password="AnotherPassword456?")
        response = test_client.post(url, json=second)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "errors": ["Email already in use"],
        }

        # The first identity is untouched: only its password logs in
        login_url = f"{api_v1_prefix}/accounts/login"
        credentials = {"email": registration_data["email"]}
        assert (
            test_client.post(
                login_url,
                json={**credentials, "password": registration_data["password"]},
            ).status_code
            == 200
        )
        assert (
            test_client.post(
                login_url,
                json={**credentials, "password": second["password"]},
            ).json()
            == INVALID_AUTH
        )

    def test_duplicate_check_ignores_case(
        self, test_client: TestClient, registration_data, api_v1_prefix
    ):
        url = f"{api_v1_prefix}/accounts/register"
        test_client.post(url, json=registration_data)

        response = test_client.post(
            url,
            json=dict(registration_data, email="TEST@example.com"),
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["Email already in use"]

    def test_weak_password_reasons_are_passed_through(
        self, test_client: TestClient, registration_data, api_v1_prefix
    ):
        response = test_client.post(
            f"{api_v1_prefix}/accounts/register",
            json=dict(registration_data, password="short"),
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "errors": [
                "Passwords must be at least 6 characters.",
                "Passwords must have at least one non alphanumeric character.",
                "Passwords must have at least one digit ('0'-'9').",
                "Passwords must have at least one uppercase ('A'-'Z').",
            ],
        }

        # Nothing was committed for the rejected registration
        retry = test_client.post(
            f"{api_v1_prefix}/accounts/register",
            json=registration_data,
        )
        assert retry.status_code == 200

    @pytest.mark.parametrize(
        "missing",
        ["email", "password", "firstName", "lastName"],
    )
    def test_missing_field_is_invalid_payload(
        self, test_client: TestClient, registration_data, api_v1_prefix, missing
    ):
        body = {k: v for k, v in registration_data.items() if k != missing}

        response = test_client.post(f"{api_v1_prefix}/accounts/register", json=body)

        assert response.status_code == 400
        assert response.json() == INVALID_PAYLOAD

    def test_invalid_email_is_invalid_payload(
        self, test_client: TestClient, registration_data, api_v1_prefix
    ):
        response = test_client.post(
            f"{api_v1_prefix}/accounts/register",
            json=dict(registration_data, email="not-an-email"),
        )

        assert response.status_code == 400
        assert response.json() == INVALID_PAYLOAD

    def test_missing_password_never_reaches_the_service(
        self, test_client: TestClient, registration_data, api_v1_prefix
    ):
        account_service = Mock()
        test_client.app.dependency_overrides[get_account_service] = (
            lambda: account_service
        )
        body = {k: v for k, v in registration_data.items() if k != "password"}

        response = test_client.post(f"{api_v1_prefix}/accounts/register", json=body)

        assert response.json() == INVALID_PAYLOAD
        assert account_service.mock_calls == []


class TestLogin:
    """Tests for POST /api/v1/accounts/login."""

    def test_login_success(
        self, test_client: TestClient, registration_data, auth_headers, api_v1_prefix
    ):
        response = test_client.post(
            f"{api_v1_prefix}/accounts/login",
            json={
                "email": registration_data["email"],
                "password": registration_data["password"],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"success", "token"}
        claims = jwt.decode(data["token"], TEST_JWT_SECRET, algorithms=["HS256"])
        assert claims["sub"] == registration_data["email"]

    def test_capitalised_route_and_email_case(
        self, test_client: TestClient, registration_data, auth_headers, api_v1_prefix
    ):
        response = test_client.post(
            f"{api_v1_prefix}/accounts/Login",
            json={
                "email": "Test@Example.com",
                "password": registration_data["password"],
            },
        )

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_wrong_password_and_unknown_email_are_identical(
        self, test_client: TestClient, registration_data, auth_headers, api_v1_prefix
    ):
        url = f"{api_v1_prefix}/accounts/login"

        wrong_password = test_client.post(
            url,
            json={"email": registration_data["email"], "password": "Wrong123!"},
        )
        unknown_email = test_client.post(
            url,
            json={"email": "nobody@example.com", "password": "Wrong123!"},
        )

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.json() == unknown_email.json() == INVALID_AUTH

    def test_missing_password_is_invalid_payload(
        self, test_client: TestClient, api_v1_prefix
    ):
        response = test_client.post(
            f"{api_v1_prefix}/accounts/login",
            json={"email": "test@example.com"},
        )

        assert response.status_code == 400
        assert response.json() == INVALID_PAYLOAD


class TestCurrentProfile:
    """Tests for GET /api/v1/accounts/me."""

    def test_returns_profile_for_valid_token(
        self, test_client: TestClient, auth_headers, api_v1_prefix
    ):
        response = test_client.get(
            f"{api_v1_prefix}/accounts/me",
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "test@example.com"
        assert data["first_name"] == "Ada"
        assert data["last_name"] == "Lovelace"
        assert data["phone"] == ""
        assert data["country"] == ""
        assert data["status"] == 1

    def test_missing_token(self, test_client: TestClient, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/accounts/me")

        assert response.status_code == 401
        assert response.json() == INVALID_TOKEN
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_token_from_other_secret(self, test_client: TestClient, api_v1_prefix):
        other = TokenService(JwtConfig(secret="some-other-secret-0123456789abcdef"))
        token = other.issue_token(_stranger())

        response = test_client.get(
            f"{api_v1_prefix}/accounts/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json() == INVALID_TOKEN

    def test_expired_token(self, test_client: TestClient, api_v1_prefix):
        issued_long_ago = TokenService(
            JwtConfig(secret=TEST_JWT_SECRET),
            clock=lambda: utc_now() - timedelta(hours=4),
        )
        token = issued_long_ago.issue_token(_stranger())

        response = test_client.get(
            f"{api_v1_prefix}/accounts/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json() == INVALID_TOKEN

    def test_valid_token_without_profile(self, test_client: TestClient, api_v1_prefix):
        token = TokenService(JwtConfig(secret=TEST_JWT_SECRET)).issue_token(
            _stranger(),
        )

        response = test_client.get(
            f"{api_v1_prefix}/accounts/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestApplication:
    """Application-level behavior."""

    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_empty_secret_fails_at_startup(self, api_settings):
        settings = api_settings.model_copy(update={"jwt_secret": SecretStr("")})

        with pytest.raises(ConfigurationError):
            create_app(settings=settings)

    def test_unexpected_error_is_500_envelope(self, api_settings, api_v1_prefix):
        def broken_service():
            raise RuntimeError("boom")

        app = create_app(settings=api_settings)
        app.dependency_overrides[get_account_service] = broken_service

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.post(
                f"{api_v1_prefix}/accounts/login",
                json={"email": "test@example.com", "password": "Secure123!"},
            )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "errors": ["An internal error occurred"],
        }


def _stranger() -> IdentityData:
    return IdentityData(
        id="00000000-0000-0000-0000-000000000000",
        email="stranger@example.com",
        normalized_email="stranger@example.com",
        password_hash="unused",
        email_confirmed=True,
    )
