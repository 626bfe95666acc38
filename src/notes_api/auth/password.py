"""
notes_api.auth.password

Password hashing with bcrypt.

bcrypt salts every hash and encodes the work factor into its output, so
`verify_password` needs nothing but the stored string. Input is truncated to
bcrypt's 72-byte limit on both paths.

The `*_async` variants run the hash in a worker thread; request handlers must
use them so the event loop keeps serving other requests while bcrypt works.
"""

from __future__ import annotations

import asyncio
from functools import lru_cache

import bcrypt

_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, *, rounds: int = 12) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Constant-time comparison; a malformed stored hash is a mismatch, not an error.
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=8)
def dummy_hash(rounds: int) -> str:
    # Stand-in for unknown accounts so a failed lookup costs the same as a wrong password.
    return hash_password("notes-api-no-such-user", rounds=rounds)


async def hash_password_async(password: str, *, rounds: int = 12) -> str:
    return await asyncio.to_thread(hash_password, password, rounds=rounds)


async def verify_password_async(password: str, password_hash: str) -> bool:
    return await asyncio.to_thread(verify_password, password, password_hash)


async def dummy_hash_async(rounds: int) -> str:
    return await asyncio.to_thread(dummy_hash, rounds)
