"""Fail-safe PKCE predicates for untrusted input.

Each predicate accepts any value (wrong types and ``None`` included) and
answers ``False`` instead of raising, so they can be applied directly to
request parameters received from a network peer.
"""

from __future__ import annotations

import re
import secrets
from typing import Any

from pkce_codes.constants import (
    CHALLENGE_MAX_LENGTH,
    CHALLENGE_MIN_LENGTH,
    VERIFIER_ALPHABET,
    VERIFIER_MAX_LENGTH,
    VERIFIER_MIN_LENGTH,
)
from pkce_codes.models.errors import InvalidVerifierError
from pkce_codes.primitives.challenge import derive_challenge

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]+")
_ALLOWED = frozenset(VERIFIER_ALPHABET)


def is_valid_verifier(value: Any) -> bool:
    """Check whether a value is an RFC 7636 compliant code verifier."""
    if not isinstance(value, str):
        return False
    if not VERIFIER_MIN_LENGTH <= len(value) <= VERIFIER_MAX_LENGTH:
        return False
    return all(char in _ALLOWED for char in value)


def is_valid_challenge(value: Any) -> bool:
    """Check whether a value looks like a base64url encoded code challenge.

    Only the unpadded base64url alphabet is accepted. The length window is
    wider than the 43 characters S256 produces, to tolerate other
    conforming implementations.
    """
    if not isinstance(value, str):
        return False
    if not CHALLENGE_MIN_LENGTH <= len(value) <= CHALLENGE_MAX_LENGTH:
        return False
    return _BASE64URL_RE.fullmatch(value) is not None


def verify_pair(verifier: Any, challenge: Any) -> bool:
    """Check that a code verifier derives the expected code challenge.

    Intended for the authorization server side of the token exchange, where
    both values come from the client.

    Args:
        verifier: Code verifier submitted with the token request
        challenge: Code challenge stored from the authorization request

    Returns:
        True only if ``verifier`` is valid and hashes to ``challenge``
    """
    if not isinstance(verifier, str) or not is_valid_challenge(challenge):
        return False

    try:
        expected = derive_challenge(verifier)
    except InvalidVerifierError:
        return False

    return secrets.compare_digest(expected, challenge)
