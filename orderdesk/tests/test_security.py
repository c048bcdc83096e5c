from datetime import timedelta

import pytest

from ..core.security import create_access_token, decode_access_token, hash_password, verify_password


def _tamper_signature(token):
    header, payload, signature = token.split(".")
    first = "A" if signature[0] != "A" else "B"
    return ".".join([header, payload, first + signature[1:]])


def test_hash_and_verify_password():
    hashed = hash_password("p1")
    assert hashed != "p1"
    assert verify_password("p1", hashed) is True
    assert verify_password("wrong", hashed) is False


def test_hash_is_salted():
    assert hash_password("same") != hash_password("same")


def test_verify_rejects_malformed_hash():
    with pytest.raises(ValueError):
        verify_password("p1", "not-a-bcrypt-hash")


def test_token_valid_right_after_issuance():
    token = create_access_token({"id": "user-1", "email": "a@x.com"})
    identity = decode_access_token(token)
    assert identity is not None
    assert identity.id == "user-1"
    assert identity.email == "a@x.com"


def test_expired_token_is_invalid():
    token = create_access_token({"id": "user-1", "email": "a@x.com"}, expires_delta=timedelta(seconds=-1))
    assert decode_access_token(token) is None


def test_tampered_signature_is_invalid():
    token = create_access_token({"id": "user-1", "email": "a@x.com"})
    assert decode_access_token(_tamper_signature(token)) is None


def test_garbage_token_is_invalid():
    assert decode_access_token("not.a.token") is None
    assert decode_access_token("") is None
