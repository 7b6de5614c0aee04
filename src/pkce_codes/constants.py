"""RFC 7636 constants shared by the PKCE primitives and validators.

See https://datatracker.ietf.org/doc/html/rfc7636 for the normative values.
"""

from __future__ import annotations

import string
from typing import Final

# RFC 7636 Section 4.1: code_verifier = 43*128unreserved
VERIFIER_MIN_LENGTH: Final[int] = 43
VERIFIER_MAX_LENGTH: Final[int] = 128

# Unreserved characters from RFC 3986 Section 2.3
VERIFIER_ALPHABET: Final[str] = string.ascii_letters + string.digits + "-._~"

CHALLENGE_METHOD: Final[str] = "S256"

# BASE64URL(SHA256(...)) of a 32-byte digest without padding
CHALLENGE_LENGTH: Final[int] = 43

# Looser window accepted when checking challenges from other implementations
CHALLENGE_MIN_LENGTH: Final[int] = 20
CHALLENGE_MAX_LENGTH: Final[int] = 100
