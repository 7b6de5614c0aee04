"""PKCE pair record.

Contains the immutable verifier/challenge/method triple produced for each
authorization attempt, and its serialization to the RFC 7636 parameter names.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pkce_codes.constants import CHALLENGE_METHOD
from pkce_codes.models.errors import (
    InvalidChallengeError,
    UnsupportedChallengeMethodError,
)
from pkce_codes.primitives.challenge import validate_verifier
from pkce_codes.primitives.validation import is_valid_challenge, verify_pair


@dataclass(frozen=True)
class PKCEPair:
    """PKCE parameters for a single OAuth authorization code flow.

    The client keeps ``verifier`` until the token exchange and sends
    ``challenge`` and ``method`` with the authorization request.
    """

    verifier: str = field(repr=False)
    challenge: str
    method: str = field(default=CHALLENGE_METHOD)

    def __post_init__(self) -> None:
        """Validate the shape of each field (RFC 7636 Sections 4.1 - 4.3)."""
        validate_verifier(self.verifier)
        if not is_valid_challenge(self.challenge):
            raise InvalidChallengeError("code_challenge must be unpadded base64url")
        if self.method != CHALLENGE_METHOD:
            raise UnsupportedChallengeMethodError(
                f"Only {CHALLENGE_METHOD} code challenge method is supported"
            )

    def matches(self) -> bool:
        """Check that the challenge was derived from the verifier."""
        return verify_pair(self.verifier, self.challenge)

    def to_dict(self) -> dict[str, str]:
        """Convert to the RFC 7636 parameter names."""
        return {
            "code_verifier": self.verifier,
            "code_challenge": self.challenge,
            "code_challenge_method": self.method,
        }

    def authorization_params(self) -> dict[str, str]:
        """Parameters to add to the authorization request query string.

        The verifier is never part of the authorization request.
        """
        return {
            "code_challenge": self.challenge,
            "code_challenge_method": self.method,
        }

    def token_params(self) -> dict[str, str]:
        """Parameters to add to the token request form body."""
        return {"code_verifier": self.verifier}
