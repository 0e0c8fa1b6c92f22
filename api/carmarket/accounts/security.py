"""
Password hashing helpers.

bcrypt only accepts 72 bytes of input, so passwords are first reduced to a
fixed-length SHA-256 digest (base64, 44 bytes) and that digest is hashed.
"""

from __future__ import annotations

import base64
import hashlib

import bcrypt

from carmarket.core import config


class PasswordError(ValueError):
    pass


def _prehash(plain_password: str) -> bytes:
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(plain_password: str) -> str:
    if not plain_password:
        raise PasswordError("Password is empty.")
    salt = bcrypt.gensalt(rounds=config.bcrypt_rounds())
    return bcrypt.hashpw(_prehash(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    hashed = (password_hash or "").encode("utf-8")
    if not plain_password or not hashed:
        return False
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed)
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
