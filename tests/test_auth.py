import pytest
from unittest.mock import patch
from fastapi import HTTPException

from crate_ledger.api.deps import get_current_user
from crate_ledger.config import DEFAULT_USERS_BY_PIN, UserAccount
from crate_ledger.core.security import lookup_pin, create_access_token, verify_token
from crate_ledger.main import app


def test_lookup_pin_known_users():
    assert lookup_pin("0717", DEFAULT_USERS_BY_PIN) == UserAccount(name="Admin", role="admin")
    assert lookup_pin("222222", DEFAULT_USERS_BY_PIN).role == "driver"
    # Leerzeichen werden ignoriert
    assert lookup_pin(" 111111 ", DEFAULT_USERS_BY_PIN).name == "Ákos"


@pytest.mark.parametrize("pin", ["", "0000", "07170", None])
def test_lookup_pin_unknown(pin):
    assert lookup_pin(pin, DEFAULT_USERS_BY_PIN) is None


def test_token_round_trip():
    token = create_access_token(UserAccount(name="Vasárnapi", role="driver"))
    payload = verify_token(token)

    assert payload["sub"] == "Vasárnapi"
    assert payload["role"] == "driver"


def test_expired_token_rejected():
    token = create_access_token(UserAccount(name="Admin", role="admin"), expires_minutes=-1)
    with pytest.raises(HTTPException) as excinfo:
        verify_token(token)
    assert excinfo.value.status_code == 401


def test_garbage_token_rejected():
    with pytest.raises(HTTPException) as excinfo:
        verify_token("not-a-token")
    assert excinfo.value.status_code == 401


@pytest.mark.asyncio
async def test_auth_success():
    mock_payload = {"sub": "Gyuri", "role": "driver", "exp": 0}

    with patch("crate_ledger.api.deps.verify_token", return_value=mock_payload):
        user = await get_current_user(token="valid-token")

        assert user == {"name": "Gyuri", "role": "driver"}


@pytest.mark.asyncio
async def test_auth_failure():
    with patch("crate_ledger.api.deps.verify_token", side_effect=HTTPException(status_code=401, detail="Invalid token")):
        with pytest.raises(HTTPException) as excinfo:
            await get_current_user(token="invalid-token")

        assert excinfo.value.status_code == 401


class TestLoginFlow:
    """PIN-Anmeldung über die API mit echtem Token"""

    @pytest.fixture(autouse=True)
    def real_auth(self, client):
        app.dependency_overrides.pop(get_current_user, None)

    def test_login_and_me(self, client):
        response = client.post("/api/v1/auth/login", json={"pin": "222222"})
        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["user"] == {"name": "Gyuri", "role": "driver"}

        headers = {"Authorization": f"Bearer {data['access_token']}"}
        me = client.get("/api/v1/auth/me", headers=headers)
        assert me.json() == {"name": "Gyuri", "role": "driver"}

    def test_wrong_pin(self, client):
        response = client.post("/api/v1/auth/login", json={"pin": "999999"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Ungültige PIN"

    def test_requests_without_token_rejected(self, client):
        assert client.get("/api/v1/partners").status_code == 401

    def test_invalid_token_rejected(self, client):
        response = client.get("/api/v1/partners", headers={"Authorization": "Bearer kaputt"})
        assert response.status_code == 401

    def test_driver_token_cannot_create_partner(self, client):
        token = client.post("/api/v1/auth/login", json={"pin": "111111"}).json()["access_token"]
        response = client.post(
            "/api/v1/partners",
            json={"name": "Huber"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 403

    def test_admin_token_can_create_partner(self, client):
        token = client.post("/api/v1/auth/login", json={"pin": "0717"}).json()["access_token"]
        response = client.post(
            "/api/v1/partners",
            json={"name": "Huber"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 201
