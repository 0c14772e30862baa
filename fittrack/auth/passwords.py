# -*- coding: utf-8 -*-
"""Auth — password hashing.

Hashes are stored in the users table as
``pbkdf2_sha256$<iterations>$<salt>$<digest>`` (salt and digest base64url, unpadded).
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

from .tokens import b64url_decode, b64url_encode

SCHEME = "pbkdf2_sha256"
ITERATIONS = 200_000
SALT_BYTES = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    salt = secrets.token_bytes(SALT_BYTES)
    digest = _derive(password, salt, ITERATIONS)
    return "$".join((SCHEME, str(ITERATIONS), b64url_encode(salt), b64url_encode(digest)))


def verify_password(password: str, stored_hash: str) -> bool:
    parts = stored_hash.split("$")
    if len(parts) != 4 or parts[0] != SCHEME:
        return False
    try:
        iterations = int(parts[1])
        salt = b64url_decode(parts[2])
        expected = b64url_decode(parts[3])
    except ValueError:
        return False
    if iterations <= 0:
        return False
    return hmac.compare_digest(_derive(password, salt, iterations), expected)
