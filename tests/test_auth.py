# =============================================================================
# tests/test_auth.py - Authentication Tests
# =============================================================================
# Tests for token issuing/verification, password hashing, the credential
# store and the /api/auth endpoints.
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from jose import jwt

from app.auth.tokens import (
    create_access_token,
    create_refresh_token,
    verify_access_token,
    verify_refresh_token,
)
from app.config import Settings
from app.exceptions import ConflictError, UnauthorizedError
from core.models.credential import RegisterRequest
from core.services.credential_service import CredentialService
from lib.passwords import hash_password, verify_password


# =============================================================================
# Token Tests
# =============================================================================

class TestTokens:
    """Tests for the access/refresh token issuer."""

    def test_access_token_round_trip(self, settings):
        token = create_access_token("alice", settings)
        payload = verify_access_token(token, settings)

        assert payload["username"] == "alice"
        assert payload["type"] == "access"

    def test_access_token_lifetime(self, settings):
        payload = verify_access_token(create_access_token("alice", settings), settings)
        assert payload["exp"] - payload["iat"] == 15 * 60

    def test_refresh_token_lifetime(self, settings):
        payload = verify_refresh_token(create_refresh_token("alice", settings), settings)
        assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60

    def test_token_types_are_not_interchangeable(self, settings):
        access = create_access_token("alice", settings)
        refresh = create_refresh_token("alice", settings)

        assert verify_refresh_token(access, settings) is None
        assert verify_access_token(refresh, settings) is None

    def test_wrong_secret_fails(self, settings):
        other = Settings(JWT_SECRET="another-secret-0123456789")
        token = create_access_token("alice", other)
        assert verify_access_token(token, settings) is None

    def test_expired_token_fails(self, settings):
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode(
            {"username": "alice", "type": "access", "iat": past, "exp": past + timedelta(minutes=15)},
            settings.JWT_SECRET,
            algorithm="HS256",
        )
        assert verify_access_token(token, settings) is None

    def test_garbage_fails(self, settings):
        assert verify_access_token("not.a.token", settings) is None


# =============================================================================
# Password Tests
# =============================================================================

class TestPasswords:
    """Tests for bcrypt hashing."""

    def test_hash_and_verify(self):
        hashed = hash_password("secret")
        assert hashed != "secret"
        assert verify_password("secret", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_non_bcrypt_hash_is_rejected(self):
        assert verify_password("secret", "plain-text") is False


# =============================================================================
# Credential Store Tests
# =============================================================================

class TestCredentialService:
    """Tests for CredentialService against mongomock."""

    @pytest.fixture
    def service(self, connection):
        service = CredentialService(connection.database)
        service.ensure_indexes()
        return service

    def test_create_hides_password(self, service):
        created = service.create_credential(RegisterRequest(username="alice", password="secret"))

        assert created["username"] == "alice"
        assert "password" not in created
        assert "password_hash" not in created

    def test_stores_hash_not_plain_password(self, service, connection):
        service.create_credential(RegisterRequest(username="alice", password="secret"))

        stored = connection.database["auth"].find_one({"username": "alice"})

        assert "password" not in stored
        assert verify_password("secret", stored["password_hash"])

    def test_extra_fields_are_kept(self, service):
        created = service.create_credential(
            RegisterRequest(username="alice", password="secret", email="alice@example.com")
        )
        assert created["email"] == "alice@example.com"

    def test_client_supplied_id_is_ignored(self, service, connection):
        created = service.create_credential(
            RegisterRequest.model_validate({"username": "eve", "password": "secret", "_id": "chosen"})
        )

        stored = connection.database["auth"].find_one({"username": "eve"})

        assert isinstance(stored["_id"], ObjectId)
        assert created["_id"] == str(stored["_id"])
        assert connection.database["auth"].find_one({"_id": "chosen"}) is None

    def test_duplicate_username_raises_conflict(self, service):
        service.create_credential(RegisterRequest(username="alice", password="secret"))

        with pytest.raises(ConflictError) as exc_info:
            service.create_credential(RegisterRequest(username="alice", password="other"))

        assert exc_info.value.message == "Duplicate value for username."

    def test_authenticate(self, service):
        service.create_credential(RegisterRequest(username="alice", password="secret"))

        assert service.authenticate("alice", "secret")["username"] == "alice"

        with pytest.raises(UnauthorizedError):
            service.authenticate("alice", "wrong")
        with pytest.raises(UnauthorizedError):
            service.authenticate("bob", "secret")


# =============================================================================
# Endpoint Tests
# =============================================================================

class TestAuthEndpoints:
    """Tests for /api/auth."""

    def test_register_issues_tokens(self, registered_user, settings):
        assert verify_access_token(registered_user["accessToken"], settings)["username"] == "alice"
        assert verify_refresh_token(registered_user["refreshToken"], settings)["username"] == "alice"

    def test_register_duplicate_is_409(self, client, registered_user):
        response = client.post("/api/auth/register", json={"username": "alice", "password": "x"})

        assert response.status_code == 409
        assert response.json()["message"] == "Duplicate value for username."

    def test_register_missing_password_is_400(self, client):
        response = client.post("/api/auth/register", json={"username": "alice"})

        assert response.status_code == 400
        assert response.json()["message"] == "password: Field required"

    def test_login(self, client, registered_user, settings):
        response = client.post("/api/auth/login", json={"username": "alice", "password": "secret"})

        assert response.status_code == 200
        assert verify_access_token(response.json()["accessToken"], settings)["username"] == "alice"

    def test_login_wrong_password_is_401(self, client, registered_user):
        response = client.post("/api/auth/login", json={"username": "alice", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid username or password"

    def test_login_unknown_user_is_401(self, client):
        response = client.post("/api/auth/login", json={"username": "bob", "password": "secret"})
        assert response.status_code == 401

    def test_refresh_issues_new_pair(self, client, registered_user, settings):
        response = client.post(
            "/api/auth/refresh",
            json={"refreshToken": registered_user["refreshToken"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert verify_access_token(body["accessToken"], settings)["username"] == "alice"
        assert verify_refresh_token(body["refreshToken"], settings)["username"] == "alice"

    def test_refresh_without_token_is_401(self, client):
        assert client.post("/api/auth/refresh").status_code == 401
        assert client.post("/api/auth/refresh", json={}).status_code == 401

    def test_refresh_with_access_token_is_401(self, client, registered_user):
        response = client.post(
            "/api/auth/refresh",
            json={"refreshToken": registered_user["accessToken"]},
        )
        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Unauthorized"

    def test_logout(self, client):
        response = client.post("/api/auth/logout")
        assert response.status_code == 200
        assert response.json() == {"message": "Logged out"}

    def test_me(self, client, registered_user):
        response = client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {registered_user['accessToken']}"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alice"
        assert body["email"] == "alice@example.com"
        assert "password_hash" not in body

    def test_register_cannot_choose_id(self, client):
        tokens = client.post(
            "/api/auth/register",
            json={"username": "eve", "password": "x", "_id": "chosen"},
        ).json()

        response = client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {tokens['accessToken']}"},
        )

        assert response.status_code == 200
        assert ObjectId.is_valid(response.json()["_id"])
        assert response.json()["_id"] != "chosen"

    def test_me_without_token_is_401(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_me_with_refresh_token_is_401(self, client, registered_user):
        response = client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {registered_user['refreshToken']}"},
        )
        assert response.status_code == 401
