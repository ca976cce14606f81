"""
Security helpers for password hashing and session authentication.

Tokens are JWT‑shaped strings (``header.payload.signature``) signed
with HMAC‑SHA256 and the application's secret key.  A token is only
half of a login: its ``sid`` claim names a session held in the
store's session store, so logging out (destroying the session)
invalidates the token immediately even though its ``exp`` has not
passed.  Passwords are hashed with PBKDF2‑HMAC‑SHA256 and a random
per‑password salt.
"""

import base64
import hashlib
import hmac
import json
import os
import secrets
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from ..schemas.user import User
from ..storage import Storage, get_storage

PBKDF2_ITERATIONS = 100_000
TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


def _encode_segment(value: Any) -> str:
    raw = json.dumps(value, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _decode_segment(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _signature(signing_input: str) -> bytes:
    return hmac.new(settings.secret_key.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256).digest()


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Sign ``claims`` plus an ``exp`` timestamp into a bearer token.

    ``expires_delta`` is the lifetime in seconds and defaults to the
    configured access token lifetime.
    """
    lifetime = expires_delta or settings.access_token_expire_minutes * 60
    body = {**claims, "exp": int(time.time()) + lifetime}
    signing_input = f"{_encode_segment(TOKEN_HEADER)}.{_encode_segment(body)}"
    signature = base64.urlsafe_b64encode(_signature(signing_input)).rstrip(b"=").decode("ascii")
    return f"{signing_input}.{signature}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify a token and return its claims, or ``None``.

    ``None`` covers every failure: wrong shape, bad signature, broken
    encoding and expiry.
    """
    signing_input, _, signature = token.rpartition(".")
    if signing_input.count(".") != 1:
        return None
    try:
        if not hmac.compare_digest(_signature(signing_input), _decode_segment(signature)):
            return None
        claims = json.loads(_decode_segment(signing_input.split(".")[1]))
        expires_at = int(claims["exp"])
    except (ValueError, TypeError, KeyError):
        return None
    if not isinstance(claims, dict) or expires_at < int(time.time()):
        return None
    return claims


def hash_password(password: str) -> str:
    """Hash a password as ``<salt hex>$<digest hex>``."""
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a ``hash_password`` result.

    Malformed stored values never match.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

def start_session(storage: Storage, user_id: int) -> str:
    """Open a session for ``user_id`` and return a token bound to it."""
    sid = secrets.token_urlsafe(32)
    ttl = settings.access_token_expire_minutes * 60
    storage.session_store.set(sid, {"user_id": user_id}, ttl=ttl)
    return create_access_token({"sub": str(user_id), "sid": sid}, expires_delta=ttl)


def end_session(storage: Storage, token: str) -> None:
    payload = decode_access_token(token)
    if payload and payload.get("sid"):
        storage.session_store.destroy(payload["sid"])


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_bearer_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> str:
    if credentials is None:
        raise _unauthorized("Unauthorized")
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    storage: Storage = Depends(get_storage),
) -> User:
    """Dependency resolving the bearer token to a stored user.

    Raises 401 when the token is invalid or expired, when its session
    has been destroyed or has expired, or when the session's user no
    longer exists.
    """
    payload = decode_access_token(token)
    if not payload:
        raise _unauthorized("Invalid or expired token")
    session = storage.session_store.get(str(payload.get("sid", "")))
    if session is None or str(session.get("user_id")) != payload.get("sub"):
        raise _unauthorized("Session expired")
    user = await storage.get_user(session["user_id"])
    if user is None:
        raise _unauthorized("User no longer exists")
    return user
