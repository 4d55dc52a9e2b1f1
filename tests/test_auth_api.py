"""API tests for registration, login, refresh, /me and admin user management."""

from datetime import timedelta

from api_case import PASSWORD, ApiTestCase
from sqlalchemy import select

from app.core.security import TokenKind, create_token
from app.models.user import User


class TestRegisterAndLogin(ApiTestCase):
    def register(self, **overrides):
        body = {"name": "New Client", "email": "New@Example.com", "password": "secret1", **overrides}
        return self.client.post("/api/v1/auth/register", json=body)

    def test_register_returns_unverified_user_and_tokens(self) -> None:
        response = self.register()
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["message"], "User registered successfully")
        user = body["data"]["user"]
        self.assertEqual(user["email"], "new@example.com")
        self.assertEqual(user["role"], "user")
        self.assertFalse(user["isVerified"])
        self.assertNotIn("passwordHash", user)
        self.assertIn("accessToken", body["data"])
        self.assertIn("refreshToken", body["data"])

    def test_register_rejects_missing_fields_and_duplicates(self) -> None:
        response = self.register(password=None)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Name, email, and password are required")
        self.assertEqual(self.register().status_code, 201)
        duplicate = self.register(email="new@example.com")
        self.assertEqual(duplicate.status_code, 409)
        self.assertEqual(duplicate.json()["message"], "User with this email already exists")

    def test_same_password_is_stored_with_different_salts(self) -> None:
        self.assertEqual(self.register(email="jo@x.com", name="Jo", password="abcdef").status_code, 201)
        self.assertEqual(self.register(email="al@x.com", name="Al", password="abcdef").status_code, 201)
        hashes = [u.password_hash for u in self.db.scalars(select(User).order_by(User.id))]
        self.assertEqual(len(hashes), 2)
        self.assertNotEqual(hashes[0], hashes[1])
        self.assertNotIn("abcdef", hashes)

    def test_register_validates_password_and_email(self) -> None:
        short = self.register(password="12345")
        self.assertEqual(short.status_code, 400)
        self.assertEqual(short.json()["message"], "Password must be at least 6 characters")
        bad_email = self.register(email="not-an-email")
        self.assertEqual(bad_email.status_code, 400)

    def test_unverified_account_cannot_log_in(self) -> None:
        self.register()
        response = self.client.post(
            "/api/v1/auth/login", json={"email": "new@example.com", "password": "secret1"}
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(
            response.json()["message"],
            "Account is pending verification. Please wait for admin approval.",
        )

    def test_login_with_verified_account(self) -> None:
        self.make_user(email="client@example.com")
        response = self.client.post(
            "/api/v1/auth/login", json={"email": "CLIENT@example.com", "password": PASSWORD}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Login successful")
        token = response.json()["data"]["accessToken"]
        me = self.client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["data"]["user"]["email"], "client@example.com")

    def test_bad_credentials_share_one_message(self) -> None:
        self.make_user(email="client@example.com")
        wrong_password = self.client.post(
            "/api/v1/auth/login", json={"email": "client@example.com", "password": "nope-nope"}
        )
        unknown = self.client.post(
            "/api/v1/auth/login", json={"email": "ghost@example.com", "password": PASSWORD}
        )
        for response in (wrong_password, unknown):
            self.assertEqual(response.status_code, 401)
            self.assertEqual(response.json()["message"], "Invalid email or password")

    def test_suspended_account_cannot_log_in(self) -> None:
        self.make_user(email="client@example.com", is_suspended=True)
        response = self.client.post(
            "/api/v1/auth/login", json={"email": "client@example.com", "password": PASSWORD}
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["message"], "Account is suspended. Please contact support.")


class TestTokensOverHttp(ApiTestCase):
    def test_me_requires_a_token(self) -> None:
        response = self.client.get("/api/v1/auth/me")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(
            response.json()["message"], "Authentication required. Please provide a valid token."
        )

    def test_refresh_token_is_not_an_access_token(self) -> None:
        user = self.make_user()
        refresh = create_token(user.id, TokenKind.REFRESH, now=self.now)
        with self.assertLogs("app.api.v1.auth", level="INFO") as logs:
            response = self.client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {refresh}"})
        self.assertIn("Access token rejected: InvalidTokenError", logs.output[0])
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Invalid token. Please login again.")

    def test_expired_access_token(self) -> None:
        user = self.make_user()
        old = create_token(user.id, TokenKind.ACCESS, now=self.now - timedelta(days=30))
        with self.assertLogs("app.api.v1.auth", level="INFO") as logs:
            response = self.client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {old}"})
        self.assertIn("Access token rejected: ExpiredTokenError", logs.output[0])
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Token expired. Please login again.")

    def test_refresh_issues_a_new_pair(self) -> None:
        user = self.make_user()
        refresh = create_token(user.id, TokenKind.REFRESH, now=self.now)
        response = self.client.post("/api/v1/auth/refresh", json={"refreshToken": refresh})
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["user"]["id"], user.id)
        me = self.client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {data['accessToken']}"})
        self.assertEqual(me.status_code, 200)

    def test_refresh_rechecks_the_account(self) -> None:
        user = self.make_user(is_deleted=True)
        refresh = create_token(user.id, TokenKind.REFRESH, now=self.now)
        response = self.client.post("/api/v1/auth/refresh", json={"refreshToken": refresh})
        self.assertEqual(response.status_code, 403)

    def test_refresh_requires_a_token(self) -> None:
        response = self.client.post("/api/v1/auth/refresh", json={})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Refresh token is required")

    def test_token_of_deleted_user_is_rejected(self) -> None:
        user = self.make_user()
        headers = self.auth_headers(user)
        user.is_deleted = True
        self.db.commit()
        response = self.client.get("/api/v1/auth/me", headers=headers)
        self.assertEqual(response.status_code, 403)


class TestUserManagement(ApiTestCase):
    def test_only_staff_can_list_users(self) -> None:
        self.make_user(email="someone@example.com")
        self.assertEqual(self.client.get("/api/v1/users", headers=self.login_as("user")).status_code, 403)
        response = self.client.get("/api/v1/users", headers=self.login_as("moderator"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["count"], 3)

    def test_moderator_cannot_write(self) -> None:
        target = self.make_user(email="someone@example.com", is_verified=False)
        headers = self.login_as("moderator")
        response = self.client.patch(f"/api/v1/users/{target.id}/approve", headers=headers)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["message"], "Access denied. Insufficient permissions.")

    def test_admin_approves_pending_account(self) -> None:
        target = self.make_user(email="pending@example.com", is_verified=False, is_suspended=True)
        response = self.client.patch(f"/api/v1/users/{target.id}/approve", headers=self.login_as("admin"))
        self.assertEqual(response.status_code, 200)
        user = response.json()["data"]["user"]
        self.assertTrue(user["isVerified"])
        self.assertFalse(user["isSuspended"])
        login = self.client.post(
            "/api/v1/auth/login", json={"email": "pending@example.com", "password": PASSWORD}
        )
        self.assertEqual(login.status_code, 200)

    def test_admin_creates_user_unverified_by_default(self) -> None:
        body = {"name": "Made By Admin", "email": "made@example.com", "password": "secret1", "role": "moderator"}
        response = self.client.post("/api/v1/users", json=body, headers=self.login_as("admin"))
        self.assertEqual(response.status_code, 201)
        user = response.json()["data"]["user"]
        self.assertEqual(user["role"], "moderator")
        self.assertFalse(user["isVerified"])

    def test_update_rejects_password_and_duplicate_email(self) -> None:
        headers = self.login_as("admin")
        target = self.make_user(email="target@example.com")
        self.make_user(email="taken@example.com")
        response = self.client.patch(f"/api/v1/users/{target.id}", json={"password": "x"}, headers=headers)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Password cannot be updated through this endpoint")
        response = self.client.patch(
            f"/api/v1/users/{target.id}", json={"email": "taken@example.com"}, headers=headers
        )
        self.assertEqual(response.status_code, 409)
        response = self.client.patch(
            f"/api/v1/users/{target.id}", json={"role": "moderator", "name": "Renamed"}, headers=headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["user"]["role"], "moderator")

    def test_delete_is_soft_and_blocks_login(self) -> None:
        target = self.make_user(email="leaving@example.com")
        response = self.client.delete(f"/api/v1/users/{target.id}", headers=self.login_as("admin"))
        self.assertEqual(response.status_code, 200)
        self.db.refresh(target)
        self.assertTrue(target.is_deleted)
        login = self.client.post(
            "/api/v1/auth/login", json={"email": "leaving@example.com", "password": PASSWORD}
        )
        self.assertEqual(login.status_code, 403)

    def test_missing_user_is_404(self) -> None:
        response = self.client.get("/api/v1/users/9999", headers=self.login_as("admin"))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "User with ID 9999 not found")
