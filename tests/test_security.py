"""Tests for password hashing, token issue/verification and settings validation."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt
from pydantic import ValidationError

from app.core.config import Settings
from app.core.security import (
    ExpiredTokenError,
    InvalidTokenError,
    TokenConfigurationError,
    TokenKind,
    create_token,
    create_token_pair,
    decode_token,
    hash_password,
    verify_password,
)

NOW = datetime(2026, 1, 15, 9, 30, tzinfo=UTC)


def make_settings(**overrides) -> Settings:
    values = {
        "JWT_SECRET": "access-secret",
        "JWT_REFRESH_SECRET": "refresh-secret",
        "JWT_ACCESS_EXPIRE_MINUTES": 60,
        "JWT_REFRESH_EXPIRE_MINUTES": 120,
        **overrides,
    }
    return Settings(_env_file=None, **values)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_verifies_only_the_original_password(self) -> None:
        hashed = hash_password("correct horse")
        self.assertNotEqual(hashed, "correct horse")
        self.assertTrue(verify_password("correct horse", hashed))
        self.assertFalse(verify_password("wrong horse", hashed))

    def test_same_password_hashes_differently_each_time(self) -> None:
        first, second = hash_password("abcdef"), hash_password("abcdef")
        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("abcdef", first))
        self.assertTrue(verify_password("abcdef", second))

    def test_malformed_hash_is_rejected_not_raised(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestTokens(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = make_settings()

    def test_access_token_round_trip_returns_subject(self) -> None:
        token = create_token(42, TokenKind.ACCESS, settings=self.settings, now=NOW)
        self.assertEqual(decode_token(token, TokenKind.ACCESS, settings=self.settings, now=NOW), "42")

    def test_pair_tokens_are_not_interchangeable(self) -> None:
        pair = create_token_pair(7, settings=self.settings, now=NOW)
        with self.assertRaises(InvalidTokenError):
            decode_token(pair["refresh_token"], TokenKind.ACCESS, settings=self.settings, now=NOW)
        with self.assertRaises(InvalidTokenError):
            decode_token(pair["access_token"], TokenKind.REFRESH, settings=self.settings, now=NOW)

    def test_token_expires_after_its_lifetime(self) -> None:
        token = create_token(1, TokenKind.ACCESS, settings=self.settings, now=NOW)
        still_valid = NOW + timedelta(minutes=59)
        self.assertEqual(decode_token(token, TokenKind.ACCESS, settings=self.settings, now=still_valid), "1")
        with self.assertRaises(ExpiredTokenError):
            decode_token(token, TokenKind.ACCESS, settings=self.settings, now=NOW + timedelta(minutes=60))

    def test_refresh_token_outlives_access_token(self) -> None:
        token = create_token(1, TokenKind.REFRESH, settings=self.settings, now=NOW)
        later = NOW + timedelta(minutes=90)
        self.assertEqual(decode_token(token, TokenKind.REFRESH, settings=self.settings, now=later), "1")

    def test_tampered_or_foreign_tokens_are_invalid(self) -> None:
        token = create_token(1, TokenKind.ACCESS, settings=self.settings, now=NOW)
        tampered = token.rsplit(".", 1)[0] + ".c2lnbmF0dXJl"
        with self.assertRaises(InvalidTokenError):
            decode_token(tampered, TokenKind.ACCESS, settings=self.settings, now=NOW)
        foreign = jwt.encode(
            {"sub": "1", "type": "access", "iat": NOW, "exp": NOW + timedelta(hours=1)},
            "some-other-secret",
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            decode_token(foreign, TokenKind.ACCESS, settings=self.settings, now=NOW)
        with self.assertRaises(InvalidTokenError):
            decode_token("garbage", TokenKind.ACCESS, settings=self.settings, now=NOW)

    def test_missing_secret_is_a_configuration_error(self) -> None:
        settings = make_settings(JWT_REFRESH_SECRET=None)
        with self.assertRaises(TokenConfigurationError):
            create_token(1, TokenKind.REFRESH, settings=settings, now=NOW)
        self.assertEqual(settings.missing_secrets(), ["JWT_REFRESH_SECRET"])


class TestSettings(unittest.TestCase):
    def test_identical_secrets_are_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET="same", JWT_REFRESH_SECRET="same")

    def test_database_url_must_be_postgres_or_sqlite(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://localhost/db")

    def test_cors_origins_and_rate_limit_are_derived(self) -> None:
        settings = make_settings(
            CORS_ORIGINS="https://a.example, ,https://b.example",
            RATE_LIMIT_MAX_REQUESTS=10,
            RATE_LIMIT_WINDOW_SECONDS=60,
        )
        self.assertEqual(settings.cors_origins, ["https://a.example", "https://b.example"])
        self.assertEqual(settings.rate_limit, "10/60 seconds")


if __name__ == "__main__":
    unittest.main()
