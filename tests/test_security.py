"""Unit tests for app.core.security: password hashing, signing key, token issue and verification."""

import base64
import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import jwt

from app.core.config import settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    legacy_password_hash,
    normalize_role,
    signing_key,
    user_id_from_claims,
    verify_password,
)


def _claims(**overrides: object) -> dict[str, object]:
    """Valid claim set for hand-built tokens."""
    now = datetime.now(UTC)
    claims: dict[str, object] = {
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "sub": "user:7",
        "uid": 7,
        "role": "user",
        "iat": now,
        "exp": now + timedelta(hours=1),
    }
    claims.update(overrides)
    return claims


def _server_key() -> bytes:
    return signing_key(settings.JWT_KEY.get_secret_value())


class TestPasswordHashing(unittest.TestCase):
    """bcrypt for new hashes; static-salt SHA-256 rows still verify."""

    def setUp(self) -> None:
        rounds = patch("app.core.security.BCRYPT_ROUNDS", 4)
        rounds.start()
        self.addCleanup(rounds.stop)

    def test_bcrypt_round_trip(self) -> None:
        hashed = hash_password("tortilla-chips")
        self.assertTrue(hashed.startswith("$2"))
        self.assertTrue(verify_password("tortilla-chips", hashed))
        self.assertFalse(verify_password("tortilla-chip", hashed))

    def test_same_password_gets_different_salts(self) -> None:
        self.assertNotEqual(hash_password("salsa"), hash_password("salsa"))

    def test_legacy_hash_verifies(self) -> None:
        legacy = legacy_password_hash("verde")
        self.assertEqual(len(legacy), 64)
        self.assertTrue(verify_password("verde", legacy))
        self.assertTrue(verify_password("verde", legacy.upper()))
        self.assertFalse(verify_password("roja", legacy))

    def test_garbage_or_missing_hash_is_rejected(self) -> None:
        self.assertFalse(verify_password("x", "not-a-hash"))
        self.assertFalse(verify_password("x", ""))
        self.assertFalse(verify_password("x", None))


class TestNormalizeRole(unittest.TestCase):
    def test_known_roles_kept(self) -> None:
        self.assertEqual(normalize_role("admin"), "admin")
        self.assertEqual(normalize_role("user"), "user")

    def test_unknown_roles_become_user(self) -> None:
        for role in (None, "", "Admin", "superuser"):
            self.assertEqual(normalize_role(role), "user")


class TestSigningKey(unittest.TestCase):
    """Base64 secrets are decoded; anything else is used as raw UTF-8 bytes."""

    def test_base64_secret_is_decoded(self) -> None:
        raw = b"\x00\x01super-secret-key-bytes\xff"
        self.assertEqual(signing_key(base64.b64encode(raw).decode()), raw)

    def test_non_base64_secret_is_raw_bytes(self) -> None:
        self.assertEqual(signing_key("dev-secret-change"), b"dev-secret-change")


class TestTokenRoundTrip(unittest.TestCase):
    def test_claims_carry_user_and_configuration(self) -> None:
        token = create_access_token(user_id=42, role="admin")
        payload = decode_access_token(token)
        self.assertEqual(payload["uid"], 42)
        self.assertEqual(payload["sub"], "user:42")
        self.assertEqual(payload["role"], "admin")
        self.assertEqual(payload["iss"], settings.JWT_ISSUER)
        self.assertEqual(payload["aud"], settings.JWT_AUDIENCE)
        self.assertEqual(payload["exp"] - payload["iat"], 60 * 60)

    def test_token_within_lifetime_is_accepted(self) -> None:
        issued = datetime.now(UTC) - timedelta(minutes=59)
        payload = decode_access_token(create_access_token(user_id=1, role="user", issued_at=issued))
        self.assertEqual(user_id_from_claims(payload), 1)


class TestTokenRejection(unittest.TestCase):
    """Every invalid token raises a PyJWTError."""

    def test_expired_token_rejected_even_with_valid_signature(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=1, seconds=5)
        token = create_access_token(user_id=1, role="user", issued_at=issued)
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_token_signed_with_other_key_rejected(self) -> None:
        token = jwt.encode(_claims(), b"some-other-signing-key-of-enough-length", algorithm="HS256")
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token)

    def test_wrong_issuer_rejected(self) -> None:
        token = jwt.encode(_claims(iss="someone-else"), _server_key(), algorithm="HS256")
        with self.assertRaises(jwt.InvalidIssuerError):
            decode_access_token(token)

    def test_wrong_audience_rejected(self) -> None:
        token = jwt.encode(_claims(aud="other-clients"), _server_key(), algorithm="HS256")
        with self.assertRaises(jwt.InvalidAudienceError):
            decode_access_token(token)

    def test_missing_expiry_rejected(self) -> None:
        claims = _claims()
        del claims["exp"]
        token = jwt.encode(claims, _server_key(), algorithm="HS256")
        with self.assertRaises(jwt.MissingRequiredClaimError):
            decode_access_token(token)

    def test_issued_in_future_rejected(self) -> None:
        future = datetime.now(UTC) + timedelta(minutes=10)
        token = jwt.encode(
            _claims(iat=future, exp=future + timedelta(hours=1)),
            _server_key(),
            algorithm="HS256",
        )
        with self.assertRaises(jwt.ImmatureSignatureError):
            decode_access_token(token)

    def test_malformed_token_rejected(self) -> None:
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token("not.a.token")


class TestUserIdFromClaims(unittest.TestCase):
    def test_accepts_int_float_and_numeric_string(self) -> None:
        self.assertEqual(user_id_from_claims({"uid": 5}), 5)
        self.assertEqual(user_id_from_claims({"uid": 5.0}), 5)
        self.assertEqual(user_id_from_claims({"uid": "5"}), 5)
        self.assertEqual(user_id_from_claims({"uid": " 12 "}), 12)

    def test_rejects_missing_or_unparseable(self) -> None:
        for payload in ({}, {"uid": None}, {"uid": "abc"}, {"uid": 5.5}, {"uid": True}, {"uid": [1]}):
            with self.subTest(payload=payload):
                with self.assertRaises(jwt.InvalidTokenError):
                    user_id_from_claims(payload)


if __name__ == "__main__":
    unittest.main()
