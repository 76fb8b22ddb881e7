"""Access Keys — capability tokens that unlock a customer's self-service view.

Invariants:
    - Plaintext keys are 64 lowercase hex characters (32 random bytes)
    - Only the SHA-256 digest is ever persisted; the plaintext leaves the
      process exactly once, in the response that issued it
    - A key is valid strictly before its expiry instant
"""

import hashlib
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta

ACCESS_KEY_BYTES = 32
ACCESS_KEY_LENGTH = ACCESS_KEY_BYTES * 2


@dataclass(frozen=True)
class IssuedAccessKey:
    plaintext: str
    digest: str
    expires_at: datetime


def digest_access_key(plaintext: str) -> str:
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


def issue_access_key(now: datetime, ttl: timedelta) -> IssuedAccessKey:
    """Generate a new key valid for ttl from now."""
    plaintext = secrets.token_hex(ACCESS_KEY_BYTES)
    return IssuedAccessKey(
        plaintext=plaintext,
        digest=digest_access_key(plaintext),
        expires_at=now + ttl,
    )


def is_key_live(expires_at: datetime | None, now: datetime) -> bool:
    return expires_at is not None and expires_at > now
