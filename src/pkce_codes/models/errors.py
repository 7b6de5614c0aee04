"""Exception hierarchy for PKCE generation and validation errors.

Provides specific exception types for each failure mode so that callers can
report exactly which RFC 7636 constraint was violated.
"""

from __future__ import annotations


class PKCEError(Exception):
    """Base exception for all PKCE related errors."""

    pass


class InvalidVerifierError(PKCEError, ValueError):
    """Raised when a code verifier violates RFC 7636 Section 4.1.

    Attributes:
        reason: Machine-readable failure code. One of ``"required"``,
            ``"invalid_type"``, ``"too_short"``, ``"too_long"`` or
            ``"invalid_character"``.
        bound: Violated length bound for ``too_short`` / ``too_long``.
        character: Offending character for ``invalid_character``.
        position: Zero-based index of ``character``.
    """

    def __init__(
        self,
        message: str,
        *,
        reason: str,
        bound: int | None = None,
        character: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.bound = bound
        self.character = character
        self.position = position


class InvalidChallengeError(PKCEError, ValueError):
    """Raised when a code challenge is not a plausible base64url S256 value."""

    pass


class UnsupportedChallengeMethodError(PKCEError, ValueError):
    """Raised when a challenge method other than S256 is requested."""

    pass
