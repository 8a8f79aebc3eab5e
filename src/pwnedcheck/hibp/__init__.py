"""
Pwned Passwords k-anonymity lookup.

Provides the SHA-1 digest builder and the range API client used to
check passwords without sending them, or their full hash, anywhere.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from pwnedcheck.hibp.client import PwnedPasswordsClient, parse_range
from pwnedcheck.hibp.digest import Digest, build_digest
from pwnedcheck.hibp.errors import (
    MalformedHashInput,
    NetworkError,
    PwnedCheckError,
    ServiceError,
)
from pwnedcheck.hibp.models import (
    Candidate,
    CandidateSource,
    CheckResult,
    RangeRecord,
    Verdict,
)

__all__ = [
    "PwnedPasswordsClient",
    "parse_range",
    "Digest",
    "build_digest",
    "PwnedCheckError",
    "MalformedHashInput",
    "NetworkError",
    "ServiceError",
    "Candidate",
    "CandidateSource",
    "CheckResult",
    "RangeRecord",
    "Verdict",
]
