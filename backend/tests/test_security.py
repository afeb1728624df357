import jwt
import pytest

from classbook.api.deps import MAX_ID, Principal, principal_from_header, principal_from_token
from classbook.core.errors import Unauthorized
from classbook.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)


def test_hash_password_is_one_way_and_verifiable():
    hashed = hash_password("s3cret-pass")

    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("s3cret-pasS", hashed)


def test_hash_password_salts_each_call():
    assert hash_password("same-input") != hash_password("same-input")


def test_passwords_longer_than_bcrypt_limit_still_verify():
    long_pw = "ä" * 60  # 120 bytes in utf-8
    hashed = hash_password(long_pw)

    assert verify_password(long_pw, hashed)


def test_verify_password_handles_missing_values():
    assert verify_password(None, "x") is False
    assert verify_password("x", "") is False


def test_hash_password_requires_value():
    with pytest.raises(ValueError):
        hash_password(None)


def test_access_token_carries_identity():
    payload = decode_token(create_access_token(user_id=7, username="ian", role_id=2))

    assert payload["sub"] == "7"
    assert payload["username"] == "ian"
    assert payload["roleId"] == 2
    assert payload["exp"] > payload["iat"]


def test_tampered_token_is_rejected():
    token = create_access_token(user_id=7, username="ian", role_id=2)
    head, body, sig = token.split(".")
    forged = ".".join([head, body, sig[::-1]])

    with pytest.raises(jwt.PyJWTError):
        decode_token(forged)


@pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer", "Bearer garbage"])
def test_principal_from_header_rejects_bad_credentials(header):
    with pytest.raises(Unauthorized):
        principal_from_header(header)


def test_principal_from_header_accepts_bearer_token():
    token = create_access_token(user_id=5, username="tom", role_id=1)

    assert principal_from_header(f"bearer {token}") == Principal(id=5, username="tom", role_id=1)


def test_token_subject_outside_id_range_is_rejected():
    token = create_access_token(user_id=MAX_ID + 1, username="big", role_id=2)

    with pytest.raises(Unauthorized):
        principal_from_token(token)
