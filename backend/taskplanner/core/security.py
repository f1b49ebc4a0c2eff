"""
Security helpers for password authentication.

The server is protected by a single shared password. Sign-in issues a JWT whose
claim carries a digest of that password, so changing TODO_PASSWORD invalidates
every previously issued token.
"""

from __future__ import annotations

import hashlib
import hmac
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from taskplanner.core.config import Settings
from taskplanner.core.exceptions import AuthenticationError

_ALGORITHM = "HS256"
_DIGEST_CLAIM = "pwd"


def password_digest(password: str) -> str:
    """SHA-256 hex digest of the password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, settings: Settings) -> bool:
    """Check a candidate password against the configured one."""
    return hmac.compare_digest(
        password.encode("utf-8"), settings.TODO_PASSWORD.encode("utf-8")
    )


def create_access_token(settings: Settings, expires_minutes: int | None = None) -> str:
    """Create a signed session token for the configured password."""
    now = datetime.now(timezone.utc)
    expires = now + timedelta(minutes=expires_minutes or settings.TODO_JWT_EXPIRE_MINUTES)
    payload = {
        _DIGEST_CLAIM: password_digest(settings.TODO_PASSWORD),
        "iat": int(now.timestamp()),
        "exp": int(expires.timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=_ALGORITHM)


def verify_access_token(token: str, settings: Settings) -> None:
    """
    Validate a session token.

    Raises:
        AuthenticationError: if the token is malformed, expired, badly signed,
            or was issued for a different password.
    """
    if not token:
        raise AuthenticationError("Authentication required")
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[_ALGORITHM])
    except JWTError as exc:
        raise AuthenticationError("Invalid token") from exc

    digest = claims.get(_DIGEST_CLAIM)
    if not isinstance(digest, str) or not hmac.compare_digest(
        digest, password_digest(settings.TODO_PASSWORD)
    ):
        raise AuthenticationError("Token does not match current password")
