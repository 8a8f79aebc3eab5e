"""Shared test data."""

API_BASE = "https://api.pwnedpasswords.com"

# SHA-1("password")
PASSWORD_DIGEST = "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"
PASSWORD_PREFIX = PASSWORD_DIGEST[:5]
PASSWORD_SUFFIX = PASSWORD_DIGEST[5:]

RANGE_BODY = "0018A45C4D1DEF81644B54AB7F969B88D65:3\n003D68EB55068C33ACE09247EE4C639306B:1"
