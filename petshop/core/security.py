"""Password hashing and bearer tokens for accounts and staff."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import bcrypt
from jose import JWTError, jwt

from petshop.core.config import Settings, get_settings

ACCOUNT_KIND = "usuario"
STAFF_KIND = "funcionario"
TOKEN_KINDS = frozenset({ACCOUNT_KIND, STAFF_KIND})


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a decoded bearer token."""

    subject: str
    kind: str
    expires_at: datetime


def hash_password(raw_password: str, *, settings: Settings | None = None) -> str:
    """Hash a password with the configured bcrypt cost."""
    rounds = (settings or get_settings()).bcrypt_rounds
    return bcrypt.hashpw(raw_password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def password_matches(raw_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(raw_password.encode(), hashed_password.encode())
    except (ValueError, TypeError):  # malformed stored hash
        return False


def issue_token(
    subject: str,
    kind: str,
    *,
    lifetime: timedelta | None = None,
    settings: Settings | None = None,
) -> str:
    """Sign a token for ``subject``; ``kind`` tells accounts and staff apart."""
    if kind not in TOKEN_KINDS:
        raise ValueError(f"Unknown token kind: {kind}")
    settings = settings or get_settings()
    if lifetime is None:
        lifetime = timedelta(days=settings.access_token_expire_days)
    claims = {"sub": subject, "kind": kind, "exp": datetime.now(UTC) + lifetime}
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def read_token(token: str, *, settings: Settings | None = None) -> TokenClaims:
    """Verify signature and expiry, raising :class:`JWTError` on any defect."""
    settings = settings or get_settings()
    payload = jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )
    subject = payload.get("sub")
    kind = payload.get("kind")
    expires = payload.get("exp")
    if not subject or kind not in TOKEN_KINDS or expires is None:
        raise JWTError("Token is missing its subject, kind or expiry")
    return TokenClaims(
        subject=str(subject),
        kind=kind,
        expires_at=datetime.fromtimestamp(expires, UTC),
    )
