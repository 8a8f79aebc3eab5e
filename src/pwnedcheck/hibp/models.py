"""
Data models for Pwned Passwords checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class CandidateSource(str, Enum):
    """Where a candidate password came from."""

    ARGUMENT = "argument"
    FILE = "file"


class Verdict(str, Enum):
    """Outcome of checking one candidate."""

    EXPOSED = "exposed"
    CLEAR = "clear"
    UNKNOWN = "unknown"  # lookup failed, NOT evidence the password is safe


@dataclass(frozen=True)
class Candidate:
    """A password (or SHA-1 hash) queued for checking."""

    value: str
    source: CandidateSource = CandidateSource.ARGUMENT
    position: int = 1  # argument index or file line number, 1-based

    @property
    def display_value(self) -> str:
        """Value safe to print; undecodable bytes show as U+FFFD."""
        return self.value.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")

    @property
    def display_origin(self) -> str:
        if self.source == CandidateSource.FILE:
            return f"line {self.position}"
        return f"password {self.position}"


@dataclass(frozen=True)
class RangeRecord:
    """One SUFFIX:COUNT line from a range response."""

    suffix: str
    count: int | None = None

    @property
    def is_padding(self) -> bool:
        """Padding records (Add-Padding header) always carry a zero count."""
        return self.count == 0


@dataclass
class CheckResult:
    """Result of checking a candidate against Pwned Passwords."""

    candidate: Candidate
    verdict: Verdict
    # Never store the digest or the password beyond the candidate itself
    hash_prefix: str = ""
    error: str | None = None
    checked_at: datetime = field(default_factory=datetime.now)

    @property
    def is_exposed(self) -> bool:
        return self.verdict == Verdict.EXPOSED

    @property
    def is_clear(self) -> bool:
        return self.verdict == Verdict.CLEAR

    @property
    def is_unknown(self) -> bool:
        return self.verdict == Verdict.UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, without the candidate value."""
        return {
            "source": self.candidate.source.value,
            "position": self.candidate.position,
            "verdict": self.verdict.value,
            "hash_prefix": self.hash_prefix,
            "checked_at": self.checked_at.isoformat(),
            "error": self.error,
        }
