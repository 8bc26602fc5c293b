"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from notebook.presentation.api.app import API_V1_PREFIX, create_app
from notebook_config.settings import Settings

from tests.shared.fixtures.factories import TEST_JWT_SECRET


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test settings backed by a throwaway SQLite file."""
    return Settings(
        jwt_secret=SecretStr(TEST_JWT_SECRET),
        jwt_algorithm="HS256",
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        bcrypt_rounds=4,
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_client(api_settings):
    """Test client; entering it runs the lifespan that creates the tables."""
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def registration_data() -> dict:
    return {
        "email": "test@example.com",
        "password": "SecurePassword123!",
        "firstName": "Ada",
        "lastName": "Lovelace",
    }


@pytest.fixture
def auth_headers(test_client, registration_data, api_v1_prefix) -> dict:
    """Auth headers for a freshly registered account."""
    response = test_client.post(
        f"{api_v1_prefix}/accounts/register",
        json=registration_data,
    )
    assert response.status_code == 200

    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}
