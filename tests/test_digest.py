"""Tests for SHA-1 digest building."""

import hashlib

import pytest

from pwnedcheck.hibp.digest import Digest, build_digest
from pwnedcheck.hibp.errors import MalformedHashInput
from tests.constants import PASSWORD_DIGEST


class TestBuildDigest:
    """Tests for build_digest()."""

    def test_known_vector(self):
        """SHA-1 of 'password' matches the published value."""
        assert build_digest("password").value == PASSWORD_DIGEST

    @pytest.mark.parametrize("password", ["", "a", "hunter2", "pässwörd", "x" * 500])
    def test_plaintext_is_deterministic_uppercase_hex(self, password):
        first = build_digest(password)
        second = build_digest(password)

        assert first == second
        assert len(first.value) == 40
        assert first.value == first.value.upper()
        int(first.value, 16)

    def test_unicode_differs_from_ascii(self):
        assert build_digest("é") != build_digest("e")

    def test_undecodable_bytes_hashed_raw(self):
        """Surrogate-escaped bytes from argv or a file hash as the original bytes."""
        digest = build_digest("caf\udce9")

        assert digest.value == hashlib.sha1(b"caf\xe9").hexdigest().upper()
        assert digest.prefix == "D2F52"

    def test_lone_surrogates_do_not_raise(self):
        digest = build_digest("\udce9t\udce9")
        assert digest.value == hashlib.sha1(b"\xe9t\xe9").hexdigest().upper()

    def test_surrogate_hashed_input_is_malformed(self):
        with pytest.raises(MalformedHashInput):
            build_digest("\udce9" * 40, already_hashed=True)

    def test_hashed_input_uppercased(self):
        digest = build_digest(PASSWORD_DIGEST.lower(), already_hashed=True)
        assert digest.value == PASSWORD_DIGEST

    def test_hashed_input_passthrough(self):
        assert build_digest(PASSWORD_DIGEST, already_hashed=True).value == PASSWORD_DIGEST

    def test_hashed_input_surrounding_whitespace(self):
        assert build_digest(f"  {PASSWORD_DIGEST}\n", already_hashed=True).value == PASSWORD_DIGEST

    @pytest.mark.parametrize("bad", ["", "5BAA6", PASSWORD_DIGEST + "0", "Z" * 40, "password"])
    def test_malformed_hashed_input(self, bad):
        with pytest.raises(MalformedHashInput):
            build_digest(bad, already_hashed=True)

    def test_malformed_hash_is_value_error(self):
        with pytest.raises(ValueError):
            build_digest("nothex", already_hashed=True)

    def test_plaintext_that_looks_like_hash_is_hashed(self):
        assert build_digest(PASSWORD_DIGEST).value != PASSWORD_DIGEST


class TestDigest:
    """Tests for the Digest value type."""

    def test_prefix_and_suffix(self):
        digest = Digest(PASSWORD_DIGEST)
        assert digest.prefix == "5BAA6"
        assert digest.suffix == "1E4C9B93F3F0682250B6CF8331B7EE68FD8"
        assert len(digest.suffix) == 35

    def test_prefix_plus_suffix_reconstructs(self):
        digest = build_digest("correct horse battery staple")
        assert digest.prefix + digest.suffix == digest.value

    def test_str(self):
        assert str(Digest(PASSWORD_DIGEST)) == PASSWORD_DIGEST
