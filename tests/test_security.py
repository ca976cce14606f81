# tests/test_security.py
import pytest
from fastapi import HTTPException

from creator_hub_api.app.core import security
from creator_hub_api.app.core.security import (
    create_access_token,
    decode_access_token,
    end_session,
    get_current_user,
    hash_password,
    start_session,
    verify_password,
)
from creator_hub_api.app.schemas.user import UserCreate
from creator_hub_api.app.storage import MemStorage


def test_password_hash_round_trip():
    hashed = hash_password("hunter2")
    assert hashed != "hunter2"
    assert verify_password("hunter2", hashed)
    assert not verify_password("hunter3", hashed)


def test_same_password_hashes_differently():
    assert hash_password("pw") != hash_password("pw")


def test_malformed_hash_never_matches():
    assert not verify_password("pw", "not-a-hash")
    assert not verify_password("pw", "zz$zz")


def test_token_claims_survive_decoding():
    token = create_access_token({"sub": "3", "sid": "abc"})
    payload = decode_access_token(token)
    assert payload["sub"] == "3"
    assert payload["sid"] == "abc"
    assert "exp" in payload


def test_tampered_token_is_rejected():
    token = create_access_token({"sub": "3"})
    header, payload, signature = token.split(".")
    forged = create_access_token({"sub": "4"}).split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("garbage") is None
    assert decode_access_token("a.b.c") is None


def test_misshapen_tokens_are_rejected():
    token = create_access_token({"sub": "3"})
    assert decode_access_token(token + ".extra") is None
    assert decode_access_token("h\u00e9ader.payload.sig") is None
    assert decode_access_token("") is None


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "3"}, expires_delta=-10)
    assert decode_access_token(token) is None


def test_token_signed_with_other_secret_is_rejected(monkeypatch):
    token = create_access_token({"sub": "3"})
    monkeypatch.setattr(security.settings, "secret_key", "rotated")
    assert decode_access_token(token) is None


@pytest.mark.asyncio
async def test_current_user_follows_session(storage):
    user = await storage.create_user(UserCreate(username="alice", password="x"))
    token = start_session(storage, user.id)

    assert (await get_current_user(token=token, storage=storage)).id == user.id

    end_session(storage, token)
    with pytest.raises(HTTPException) as exc:
        await get_current_user(token=token, storage=storage)
    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_current_user_rejects_unknown_user(storage):
    token = start_session(storage, 42)
    with pytest.raises(HTTPException) as exc:
        await get_current_user(token=token, storage=storage)
    assert exc.value.detail == "User no longer exists"


@pytest.mark.asyncio
async def test_session_from_other_store_is_rejected(storage):
    other = MemStorage()
    user = await other.create_user(UserCreate(username="alice", password="x"))
    await storage.create_user(UserCreate(username="alice", password="x"))
    token = start_session(other, user.id)

    with pytest.raises(HTTPException) as exc:
        await get_current_user(token=token, storage=storage)
    assert exc.value.detail == "Session expired"
