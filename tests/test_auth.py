from datetime import timedelta

import pytest
from jose import jwt

from sehaty.core.config import settings
from sehaty.core.security import create_access_token, verify_token
from sehaty.models.user import User

# Test data
test_user_data = {
    "name": "Test User",
    "email": "test@example.com",
    "password": "TestPassword123",
    "role": "patient",
    "phone_number": "+20100000000",
    "gender": "female"
}

test_login_data = {
    "email": "test@example.com",
    "password": "TestPassword123"
}

class TestAuthentication:

    def test_register_user(self, client):
        """Test user registration."""
        response = client.post("/api/auth/register", json=test_user_data)
        assert response.status_code == 201

        data = response.json()
        assert data["user"]["email"] == test_user_data["email"]
        assert data["user"]["role"] == test_user_data["role"]
        assert data["user"]["gender"] == "female"
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]
        assert data["token"]

    def test_register_duplicate_email(self, client):
        """Test registration with duplicate email."""
        first = client.post("/api/auth/register", json=test_user_data)
        assert first.status_code == 201

        response = client.post("/api/auth/register", json=test_user_data)
        assert response.status_code == 400
        assert "already registered" in response.json()["detail"]

    def test_register_invalid_password(self, client):
        """Test registration with invalid password."""
        invalid_data = test_user_data.copy()
        invalid_data["password"] = "weak"

        response = client.post("/api/auth/register", json=invalid_data)
        assert response.status_code == 422

    def test_register_admin_role_rejected(self, client):
        admin_data = test_user_data.copy()
        admin_data["role"] = "admin"

        response = client.post("/api/auth/register", json=admin_data)
        assert response.status_code == 422

    def test_login_success(self, client):
        """Test successful login."""
        client.post("/api/auth/register", json=test_user_data)

        response = client.post("/api/auth/login", json=test_login_data)
        assert response.status_code == 200

        data = response.json()
        assert data["token"]
        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == test_user_data["email"]

    def test_login_invalid_credentials(self, client):
        """Test login with an unknown email."""
        invalid_login = {
            "email": "nonexistent@example.com",
            "password": "wrongpassword"
        }

        response = client.post("/api/auth/login", json=invalid_login)
        assert response.status_code == 401

    def test_login_wrong_password(self, client):
        """Test login with wrong password."""
        client.post("/api/auth/register", json=test_user_data)

        wrong_login = test_login_data.copy()
        wrong_login["password"] = "wrongpassword"

        response = client.post("/api/auth/login", json=wrong_login)
        assert response.status_code == 401

    def test_get_current_user(self, client):
        """Test getting current user info."""
        client.post("/api/auth/register", json=test_user_data)
        login_response = client.post("/api/auth/login", json=test_login_data)

        token = login_response.json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        response = client.get("/api/auth/me", headers=headers)
        assert response.status_code == 200
        assert response.json()["user"]["email"] == test_user_data["email"]

    def test_get_current_user_invalid_token(self, client):
        """Test get current user with invalid token."""
        headers = {"Authorization": "Bearer invalid_token"}

        response = client.get("/api/auth/me", headers=headers)
        assert response.status_code == 401

    def test_get_current_user_without_token(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401

    def test_expired_token_rejected(self, client):
        register_response = client.post("/api/auth/register", json=test_user_data)
        user_id = register_response.json()["user"]["id"]

        expired = create_access_token(user_id, expires_delta=timedelta(seconds=-1))
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"})
        assert response.status_code == 401

    def test_token_for_unknown_user_rejected(self, client):
        token = create_access_token(999999)
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_change_password(self, client):
        """Test password change."""
        register_response = client.post("/api/auth/register", json=test_user_data)
        token = register_response.json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        password_data = {
            "current_password": "TestPassword123",
            "new_password": "NewPassword123"
        }

        response = client.post(
            "/api/auth/change-password",
            json=password_data,
            headers=headers
        )
        assert response.status_code == 200

        login = client.post(
            "/api/auth/login",
            json={"email": test_user_data["email"], "password": "NewPassword123"}
        )
        assert login.status_code == 200

    def test_change_password_wrong_current(self, client):
        """Test password change with wrong current password."""
        register_response = client.post("/api/auth/register", json=test_user_data)
        token = register_response.json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        password_data = {
            "current_password": "WrongPassword",
            "new_password": "NewPassword123"
        }

        response = client.post(
            "/api/auth/change-password",
            json=password_data,
            headers=headers
        )
        assert response.status_code == 400

    def test_verify_token(self, client):
        """Test token verification."""
        register_response = client.post("/api/auth/register", json=test_user_data)
        token = register_response.json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        response = client.post("/api/auth/verify-token", headers=headers)
        assert response.status_code == 200

        data = response.json()
        assert data["valid"] is True
        assert data["user_id"] == register_response.json()["user"]["id"]

    def test_login_deactivated_account(self, client, db_session):
        """Deactivated accounts are refused like bad credentials."""
        user_id = client.post("/api/auth/register", json=test_user_data).json()["user"]["id"]
        user = db_session.query(User).filter(User.id == user_id).first()
        user.is_active = False
        db_session.commit()

        response = client.post("/api/auth/login", json=test_login_data)
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_login_logs_activity(self, client):
        client.post("/api/auth/register", json=test_user_data)
        token = client.post("/api/auth/login", json=test_login_data).json()["token"]

        dashboard = client.get("/api/user/dashboard", headers={"Authorization": f"Bearer {token}"}).json()
        assert dashboard["recent_activities"][0]["type"] == "login"

class TestTokens:

    def test_token_subject_is_user_id(self):
        payload = verify_token(create_access_token(42))
        assert payload is not None
        assert payload.user_id == 42

    def test_token_expires_after_thirty_days(self):
        token = create_access_token(7)
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        assert claims["exp"] - claims["iat"] == 30 * 24 * 60 * 60

    def test_token_signed_with_other_secret_rejected(self):
        forged = jwt.encode({"sub": "1"}, "not-the-secret", algorithm=settings.ALGORITHM)
        assert verify_token(forged) is None

    @pytest.mark.parametrize("token", ["", "abc", "a.b.c"])
    def test_garbage_tokens_rejected(self, token):
        assert verify_token(token) is None
