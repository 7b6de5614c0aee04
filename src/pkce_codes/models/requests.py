"""Authorization request models for the authorization server side.

Parses the PKCE parameters a client sends with its authorization request
(RFC 7636 Section 4.3) so they can be stored and checked at token exchange.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from pkce_codes.constants import CHALLENGE_METHOD
from pkce_codes.models.errors import (
    InvalidChallengeError,
    UnsupportedChallengeMethodError,
)
from pkce_codes.primitives.validation import is_valid_challenge, verify_pair


class ChallengeParameters(BaseModel):
    """PKCE parameters received with an authorization request.

    ``code_challenge_method`` defaults to S256 here. RFC 7636 falls back to
    ``plain`` when the method is absent, but ``plain`` is not supported.
    """

    model_config = ConfigDict(frozen=True)

    code_challenge: str
    code_challenge_method: str = CHALLENGE_METHOD

    @field_validator("code_challenge")
    @classmethod
    def validate_challenge(cls, v: str) -> str:
        if not is_valid_challenge(v):
            raise InvalidChallengeError("code_challenge must be unpadded base64url")
        return v

    @field_validator("code_challenge_method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        if v != CHALLENGE_METHOD:
            raise UnsupportedChallengeMethodError(
                f"Only {CHALLENGE_METHOD} code challenge method is supported"
            )
        return v

    def verify(self, code_verifier: Any) -> bool:
        """Check a code verifier from the token request against this challenge."""
        return verify_pair(code_verifier, self.code_challenge)
