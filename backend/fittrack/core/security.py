# backend/fittrack/core/security.py
import base64
import hashlib
import hmac
import secrets

# scrypt cost parameters; changing them invalidates every stored password
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
SCRYPT_KEY_LENGTH = 64
SALT_BYTES = 16
SESSION_TOKEN_BYTES = 20


def _derive_key(password: str, salt: str) -> str:
    return hashlib.scrypt(
        password.encode(),
        salt=salt.encode(),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=SCRYPT_KEY_LENGTH,
    ).hex()


def hash_password(password: str) -> str:
    """Hash a password for storage as ``salt:hash`` (both hex)."""
    salt = secrets.token_hex(SALT_BYTES)
    return f"{salt}:{_derive_key(password, salt)}"


def verify_password(stored_password: str, candidate: str) -> bool:
    """Check a candidate password against a stored ``salt:hash`` value.

    Malformed stored values are treated as a mismatch.
    """
    salt, sep, expected = (stored_password or "").partition(":")
    if not sep or not salt or not expected:
        return False
    actual = _derive_key(candidate, salt)
    return hmac.compare_digest(actual.encode(), expected.encode())


def generate_session_token() -> str:
    """Generate an unpadded base32 session token (160 bits of entropy)."""
    raw = secrets.token_bytes(SESSION_TOKEN_BYTES)
    return base64.b32encode(raw).decode().rstrip("=")


def hash_token(token: str) -> str:
    """Hash a session token into its storage id."""
    return hashlib.sha256(token.encode()).hexdigest()


def sign_token(token: str, secret: str) -> str:
    """Keyed signature over a session token."""
    return hmac.new(secret.encode(), token.encode(), hashlib.sha256).hexdigest()


def verify_signature(token: str, signature: str, secret: str) -> bool:
    expected = sign_token(token, secret)
    return hmac.compare_digest(expected.encode(), signature.encode())
