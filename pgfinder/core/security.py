from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
import base64
import hashlib
import hmac
import os
from ..config import Settings

PASSWORD_SCHEME = "pbkdf2_sha256"


def _pbkdf2(password: str, salt: bytes, iterations: int) -> str:
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return base64.b64encode(dk).decode("utf-8")


def get_password_hash(password: str, iterations: int) -> str:
    """Hash a password with PBKDF2-SHA256 and a random per-user salt.

    Format: ``pbkdf2_sha256$<iterations>$<salt_b64>$<hash_b64>``
    """
    salt = os.urandom(16)
    salt_b64 = base64.b64encode(salt).decode("utf-8")
    return f"{PASSWORD_SCHEME}${iterations}${salt_b64}${_pbkdf2(password, salt, iterations)}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its stored hash in constant time"""
    parts = (hashed_password or "").split("$")
    if len(parts) != 4 or parts[0] != PASSWORD_SCHEME:
        return False
    _, iterations, salt_b64, hash_b64 = parts
    try:
        salt = base64.b64decode(salt_b64.encode("utf-8"))
        calc = _pbkdf2(plain_password, salt, int(iterations))
    except ValueError:
        return False
    return hmac.compare_digest(calc, hash_b64)


def create_access_token(data: dict, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token"""
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(days=settings.access_token_expire_days)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> Optional[dict]:
    """Verify JWT token and return its payload, or None when it is not valid"""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
