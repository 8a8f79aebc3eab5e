"""
Exceptions raised by the Pwned Passwords lookup.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class PwnedCheckError(Exception):
    """Base class for password check failures."""


class MalformedHashInput(PwnedCheckError, ValueError):
    """Pre-hashed input is not a 40 character hex SHA-1 digest."""


class NetworkError(PwnedCheckError):
    """Range API could not be reached (connection, DNS or timeout)."""


class ServiceError(PwnedCheckError):
    """Range API answered with a non-success status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")
