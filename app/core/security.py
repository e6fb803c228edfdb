"""Password hashing and JWT creation/verification for authentication."""

import base64
import binascii
import hashlib
import hmac
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Prefix of the static-salt SHA-256 scheme used by rows created before bcrypt.
LEGACY_SALT = "salt:"
LEGACY_HASH_LEN = 64

ROLE_ADMIN = "admin"
ROLE_USER = "user"
VALID_ROLES = frozenset({ROLE_ADMIN, ROLE_USER})


def normalize_role(role: str | None) -> str:
    """Map any unrecognized role to 'user'."""
    return role if role in VALID_ROLES else ROLE_USER


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def legacy_password_hash(plain_password: str) -> str:
    """Hex SHA-256 of the static salt followed by the password."""
    return hashlib.sha256((LEGACY_SALT + plain_password).encode("utf-8")).hexdigest()


def _is_legacy_hash(hashed: str) -> bool:
    if len(hashed) != LEGACY_HASH_LEN:
        return False
    try:
        bytes.fromhex(hashed)
    except ValueError:
        return False
    return True


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored bcrypt or legacy SHA-256 hash."""
    if not hashed:
        return False
    if _is_legacy_hash(hashed):
        return hmac.compare_digest(legacy_password_hash(plain_password), hashed.lower())
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def signing_key(secret: str) -> bytes:
    """Key material for HMAC signing: base64-decoded secret, or its raw bytes."""
    try:
        return base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError):
        return secret.encode("utf-8")


def _current_key() -> bytes:
    return signing_key(settings.JWT_KEY.get_secret_value())


def create_access_token(
    user_id: int,
    role: str,
    issued_at: datetime | None = None,
) -> str:
    """Create a JWT access token for user_id with iss, aud, sub, uid, role, iat and exp."""
    now = issued_at or datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "sub": f"user:{user_id}",
        "uid": user_id,
        "role": role,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, _current_key(), algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload.

    Signature, issuer, audience and lifetime are checked with no clock skew.
    Raises jwt.PyJWTError on any failure.
    """
    payload = jwt.decode(
        token,
        _current_key(),
        algorithms=[settings.JWT_ALGORITHM],
        issuer=settings.JWT_ISSUER,
        audience=settings.JWT_AUDIENCE,
        leeway=0,
        options={"require": ["iss", "aud", "iat", "exp"]},
    )
    # Older PyJWT releases do not reject an iat in the future.
    if payload["iat"] > datetime.now(UTC).timestamp():
        raise jwt.ImmatureSignatureError("The token is not yet valid (iat)")
    return payload


def user_id_from_claims(payload: dict[str, Any]) -> int:
    """
    Return the uid claim as int. Accepts int, integral float or numeric string.
    Raises jwt.InvalidTokenError when missing or unparseable.
    """
    uid = payload.get("uid")
    if isinstance(uid, bool):
        raise jwt.InvalidTokenError("uid claim must be numeric")
    if isinstance(uid, int):
        return uid
    if isinstance(uid, float) and uid.is_integer():
        return int(uid)
    if isinstance(uid, str):
        try:
            return int(uid.strip())
        except ValueError:
            pass
    raise jwt.InvalidTokenError("uid claim is missing or not numeric")
