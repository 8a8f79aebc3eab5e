"""
Pwned Passwords range API client.

Implements the k-anonymity lookup: only the first 5 characters of the
SHA-1 digest are sent to the API, the remaining 35 are matched locally
against the returned SUFFIX:COUNT list.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import Iterator

import httpx

from pwnedcheck import __version__
from pwnedcheck.config import PwnedCheckConfig
from pwnedcheck.hibp.digest import Digest, build_digest
from pwnedcheck.hibp.errors import (
    MalformedHashInput,
    NetworkError,
    ServiceError,
)
from pwnedcheck.hibp.models import (
    Candidate,
    CheckResult,
    RangeRecord,
    Verdict,
)

logger = logging.getLogger(__name__)


def parse_range(body: str) -> Iterator[RangeRecord]:
    """Parse a range response body into records.

    Lines that do not split into exactly two colon-separated fields
    are skipped.
    """
    for line in body.splitlines():
        parts = line.strip().split(":")
        if len(parts) != 2:
            if line.strip():
                logger.debug("Skipping malformed range record")
            continue

        hash_suffix, count = parts
        yield RangeRecord(
            suffix=hash_suffix,
            count=int(count) if count.isdigit() else None,
        )


class PwnedPasswordsClient:
    """Synchronous client for the Pwned Passwords range API.

    One instance holds one long-lived httpx.Client that is reused for
    every lookup. Pass http_client to substitute the transport.
    """

    PWNED_PASSWORDS_API = "https://api.pwnedpasswords.com"
    REQUEST_TIMEOUT = 10.0  # seconds, fixed

    def __init__(
        self,
        api_url: str | None = None,
        user_agent: str = f"PwnedCheck/{__version__}",
        add_padding: bool = False,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            api_url: Range API base URL (default: api.pwnedpasswords.com)
            user_agent: User-Agent header for requests
            add_padding: Ask the API to pad responses with zero-count records
            http_client: Pre-built httpx client; not closed by this instance
        """
        self.api_url = (api_url or self.PWNED_PASSWORDS_API).rstrip("/")
        self.user_agent = user_agent
        self.add_padding = add_padding
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.REQUEST_TIMEOUT)

    @classmethod
    def from_config(
        cls,
        config: PwnedCheckConfig,
        http_client: httpx.Client | None = None,
    ) -> "PwnedPasswordsClient":
        """Create a client from a PwnedCheckConfig."""
        return cls(
            api_url=config.api_url,
            user_agent=config.user_agent,
            add_padding=config.add_padding,
            http_client=http_client,
        )

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "PwnedPasswordsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": self.user_agent}
        if self.add_padding:
            headers["Add-Padding"] = "true"
        return headers

    def fetch_range(self, prefix: str) -> str:
        """Fetch the SUFFIX:COUNT list for a 5 character hash prefix.

        Raises:
            NetworkError: Connection failure or timeout
            ServiceError: Non-200 response
        """
        url = f"{self.api_url}/range/{prefix}"
        logger.debug(f"Querying range {prefix}")

        try:
            response = self._client.get(
                url,
                headers=self._headers(),
                timeout=self.REQUEST_TIMEOUT,
            )
        except httpx.TimeoutException as e:
            raise NetworkError("Request timeout") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Request failed: {e}") from e

        if response.status_code != 200:
            raise ServiceError(
                response.status_code,
                f"API request failed with status: {response.status_code} {response.reason_phrase}",
            )

        return response.text

    def check_exposure(self, digest: Digest) -> bool:
        """Check if a digest appears in the Pwned Passwords corpus.

        Only digest.prefix leaves this process.

        Args:
            digest: Digest from build_digest()

        Returns:
            True if the suffix is listed in the range response
        """
        suffix = digest.suffix

        for record in parse_range(self.fetch_range(digest.prefix)):
            if record.suffix == suffix and not record.is_padding:
                return True

        return False

    def check_candidate(self, candidate: Candidate, already_hashed: bool = False) -> CheckResult:
        """Digest and look up one candidate.

        Lookup failures are returned as Verdict.UNKNOWN rather than raised,
        so a batch keeps going.
        """
        try:
            digest = build_digest(candidate.value, already_hashed)
        except MalformedHashInput as e:
            logger.info(f"Skipping {candidate.display_origin}: {e}")
            return CheckResult(candidate=candidate, verdict=Verdict.UNKNOWN, error=str(e))

        try:
            exposed = self.check_exposure(digest)
        except (NetworkError, ServiceError) as e:
            logger.info(f"Lookup for {candidate.display_origin} failed: {e}")
            return CheckResult(
                candidate=candidate,
                verdict=Verdict.UNKNOWN,
                hash_prefix=digest.prefix,
                error=str(e),
            )

        return CheckResult(
            candidate=candidate,
            verdict=Verdict.EXPOSED if exposed else Verdict.CLEAR,
            hash_prefix=digest.prefix,
        )
