from codeython_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_token_carries_username():
    token = create_access_token("coder01")
    assert decode_access_token(token)["sub"] == "coder01"


def test_tampered_token_rejected():
    header, payload, signature = create_access_token("coder01").split(".")
    forged = create_access_token("admin").split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("not-a-token") is None


def test_expired_token_rejected():
    assert decode_access_token(create_access_token("coder01", expires_delta=-10)) is None


def test_password_hash_verifies():
    hashed = hash_password("strongpassword")
    assert verify_password("strongpassword", hashed)
    assert not verify_password("strongpassworD", hashed)
    assert not verify_password("strongpassword", None)
