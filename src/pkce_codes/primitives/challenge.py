"""S256 code challenge derivation (RFC 7636 Section 4.2).

The challenge is ``BASE64URL-ENCODE(SHA256(ASCII(code_verifier)))`` with the
trailing ``=`` padding removed. Derivation refuses verifiers that do not meet
Section 4.1, raising :class:`InvalidVerifierError` with the violated rule.
"""

from __future__ import annotations

import base64
import hashlib
import logging
from typing import Any

from pkce_codes.constants import (
    VERIFIER_ALPHABET,
    VERIFIER_MAX_LENGTH,
    VERIFIER_MIN_LENGTH,
)
from pkce_codes.models.errors import InvalidVerifierError

logger = logging.getLogger(__name__)

_ALLOWED = frozenset(VERIFIER_ALPHABET)


def _reject(message: str, **details: Any) -> InvalidVerifierError:
    error = InvalidVerifierError(message, **details)
    logger.debug(f"Code verifier rejected: {error.reason}")
    return error


def validate_verifier(verifier: Any) -> None:
    """Check a code verifier against RFC 7636 Section 4.1.

    Checks run in order and the first failure wins: presence, type, minimum
    length, maximum length, then the character set.

    Args:
        verifier: Candidate code verifier

    Raises:
        InvalidVerifierError: Describing the first violated constraint
    """
    if not verifier:
        raise _reject("Code verifier is required", reason="required")
    if not isinstance(verifier, str):
        raise _reject("Code verifier must be a string", reason="invalid_type")

    if len(verifier) < VERIFIER_MIN_LENGTH:
        raise _reject(
            f"Code verifier must be at least {VERIFIER_MIN_LENGTH} "
            "characters long (RFC 7636)",
            reason="too_short",
            bound=VERIFIER_MIN_LENGTH,
        )
    if len(verifier) > VERIFIER_MAX_LENGTH:
        raise _reject(
            f"Code verifier must be no more than {VERIFIER_MAX_LENGTH} "
            "characters long (RFC 7636)",
            reason="too_long",
            bound=VERIFIER_MAX_LENGTH,
        )

    for position, char in enumerate(verifier):
        if char not in _ALLOWED:
            raise _reject(
                f"Code verifier contains invalid character {char!r} at position "
                f"{position}. Only URL-safe characters are allowed (RFC 7636)",
                reason="invalid_character",
                character=char,
                position=position,
            )


def derive_challenge(verifier: str) -> str:
    """Derive the S256 code challenge for a code verifier.

    Deterministic: the same verifier always yields the same challenge.

    Args:
        verifier: The code verifier to hash

    Returns:
        Base64url-encoded SHA256 hash of the verifier, without padding

    Raises:
        InvalidVerifierError: If the verifier violates RFC 7636
    """
    validate_verifier(verifier)

    digest = hashlib.sha256(verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
