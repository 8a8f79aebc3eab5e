"""
SHA-1 digest handling for Pwned Passwords range queries.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import hashlib
import re
from dataclasses import dataclass

from pwnedcheck.hibp.errors import MalformedHashInput

DIGEST_LENGTH = 40
PREFIX_LENGTH = 5

_HEX_DIGEST = re.compile(r"^[0-9A-Fa-f]{40}$")


@dataclass(frozen=True)
class Digest:
    """Uppercase hex SHA-1 digest of a candidate password."""

    value: str

    @property
    def prefix(self) -> str:
        """First 5 characters, the only part sent to the API."""
        return self.value[:PREFIX_LENGTH]

    @property
    def suffix(self) -> str:
        """Remaining 35 characters, matched locally."""
        return self.value[PREFIX_LENGTH:]

    def __str__(self) -> str:
        return self.value


def build_digest(value: str, already_hashed: bool = False) -> Digest:
    """Build the digest for a candidate.

    Args:
        value: Plaintext password, or a SHA-1 hex digest if already_hashed
        already_hashed: Treat value as a precomputed digest

    Returns:
        Digest with uppercase hex value

    Raises:
        MalformedHashInput: already_hashed is set and value is not 40 hex chars
    """
    if already_hashed:
        candidate = value.strip()
        if not _HEX_DIGEST.match(candidate):
            raise MalformedHashInput(
                f"Expected {DIGEST_LENGTH} hex characters, got {len(candidate)} characters"
            )
        return Digest(candidate.upper())

    # surrogateescape restores undecodable argv/file bytes, so the raw bytes are hashed
    raw = value.encode("utf-8", errors="surrogateescape")
    return Digest(hashlib.sha1(raw).hexdigest().upper())
