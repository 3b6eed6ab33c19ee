"""
ptf_publisher.auth.passwords

Password hashing for dashboard accounts (passlib).
"""

from __future__ import annotations

from passlib.context import CryptContext

# pbkdf2_sha256 is implemented by passlib itself, so no native backend is needed.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
