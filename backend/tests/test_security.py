# backend/tests/test_security.py
import hashlib
import hmac
import re

from fittrack.core.security import (
    hash_password,
    verify_password,
    generate_session_token,
    hash_token,
    sign_token,
    verify_signature,
)


def test_hash_password_format():
    stored = hash_password("correct horse")
    salt, _, key = stored.partition(":")
    assert re.fullmatch(r"[0-9a-f]{32}", salt)
    assert re.fullmatch(r"[0-9a-f]{128}", key)


def test_hash_password_is_salted():
    assert hash_password("same password") != hash_password("same password")


def test_verify_password_accepts_correct_password():
    stored = hash_password("correct horse")
    assert verify_password(stored, "correct horse") is True


def test_verify_password_rejects_wrong_password():
    stored = hash_password("correct horse")
    assert verify_password(stored, "battery staple") is False


def test_verify_password_uses_salt_string_as_scrypt_salt():
    salt = "00112233445566778899aabbccddeeff"
    key = hashlib.scrypt(b"secret", salt=salt.encode(), n=16384, r=8, p=1, dklen=64).hex()
    assert verify_password(f"{salt}:{key}", "secret") is True


def test_verify_password_malformed_stored_value_is_false():
    assert verify_password("no-separator", "anything") is False
    assert verify_password(":abc", "anything") is False
    assert verify_password("abc:", "anything") is False
    assert verify_password("", "anything") is False


def test_generate_session_token_is_unpadded_base32():
    token = generate_session_token()
    assert len(token) == 32
    assert re.fullmatch(r"[A-Z2-7]+", token)


def test_generate_session_token_unique():
    tokens = {generate_session_token() for _ in range(100)}
    assert len(tokens) == 100


def test_hash_token_is_sha256_hex():
    token = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
    assert hash_token(token) == hashlib.sha256(token.encode()).hexdigest()
    assert len(hash_token(token)) == 64


def test_sign_token_is_hmac_sha256():
    expected = hmac.new(b"k" * 32, b"token", hashlib.sha256).hexdigest()
    assert sign_token("token", "k" * 32) == expected


def test_sign_token_is_deterministic():
    assert sign_token("token", "secret-a" * 4) == sign_token("token", "secret-a" * 4)


def test_sign_token_depends_on_secret():
    assert sign_token("token", "secret-a" * 4) != sign_token("token", "secret-b" * 4)


def test_verify_signature():
    secret = "s" * 32
    signature = sign_token("token", secret)
    assert verify_signature("token", signature, secret) is True
    assert verify_signature("other", signature, secret) is False
    assert verify_signature("token", signature, "t" * 32) is False
    assert verify_signature("token", "", secret) is False
