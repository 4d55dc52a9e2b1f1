"""Tests for translating database constraint failures into response envelopes."""

from api_case import DatabaseTestCase
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app.core.error_handlers import is_unique_violation, register_exception_handlers
from app.models import Project, User


def client_raising(exc: Exception) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/write")
    def write() -> None:
        raise exc

    return TestClient(app)


class TestIntegrityErrors(DatabaseTestCase):
    def capture(self, *records) -> IntegrityError:
        self.db.add_all(records)
        with self.assertRaises(IntegrityError) as ctx:
            self.db.commit()
        self.db.rollback()
        return ctx.exception

    def test_duplicate_key_is_a_conflict(self) -> None:
        self.make_user(email="taken@example.com")
        exc = self.capture(User(name="Copy", email="taken@example.com", password_hash="x", role="user"))
        self.assertTrue(is_unique_violation(exc))
        response = client_raising(exc).get("/write")
        self.assertEqual(response.status_code, 409)
        self.assertEqual(
            response.json(),
            {"success": False, "message": "A record with the same unique value already exists"},
        )

    def test_missing_required_value_is_a_bad_request(self) -> None:
        exc = self.capture(User(email="nameless@example.com", password_hash="x", role="user"))
        self.assertFalse(is_unique_violation(exc))
        response = client_raising(exc).get("/write")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"success": False, "message": "Invalid or missing field value"})

    def test_project_without_owner_is_not_a_conflict(self) -> None:
        exc = self.capture(Project(name="Orphan", domain="orphan.io", target_links=5))
        self.assertFalse(is_unique_violation(exc))
        self.assertEqual(client_raising(exc).get("/write").status_code, 400)
