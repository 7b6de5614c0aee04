"""Code verifier generation for PKCE (RFC 7636 Section 4.1).

Verifiers are secrets: this module never logs their value.
"""

from __future__ import annotations

import logging
import secrets

from pkce_codes.constants import (
    VERIFIER_ALPHABET,
    VERIFIER_MAX_LENGTH,
    VERIFIER_MIN_LENGTH,
)

logger = logging.getLogger(__name__)


def _random_length() -> int:
    span = VERIFIER_MAX_LENGTH - VERIFIER_MIN_LENGTH + 1
    return VERIFIER_MIN_LENGTH + secrets.randbelow(span)


def generate_verifier(length: int | None = None) -> str:
    """Generate a cryptographically secure code verifier.

    Every character is drawn independently and uniformly from the 66
    unreserved characters ``[A-Z] / [a-z] / [0-9] / "-" / "." / "_" / "~"``
    using the ``secrets`` CSPRNG.

    Args:
        length: Exact verifier length. When omitted, a length is chosen
            uniformly at random between 43 and 128 inclusive.

    Returns:
        A new code verifier.

    Raises:
        ValueError: If ``length`` is not an integer in [43, 128]
    """
    if length is None:
        length = _random_length()
    elif isinstance(length, bool) or not isinstance(length, int):
        raise ValueError("code verifier length must be an integer")
    elif not VERIFIER_MIN_LENGTH <= length <= VERIFIER_MAX_LENGTH:
        raise ValueError(
            f"code verifier length must be {VERIFIER_MIN_LENGTH}-"
            f"{VERIFIER_MAX_LENGTH} characters"
        )

    verifier = "".join(secrets.choice(VERIFIER_ALPHABET) for _ in range(length))
    logger.debug(f"Generated code verifier of length {length}")
    return verifier
