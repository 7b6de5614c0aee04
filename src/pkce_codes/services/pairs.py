"""PKCE pair generation for OAuth client flows."""

from __future__ import annotations

import logging

from pkce_codes.constants import CHALLENGE_METHOD
from pkce_codes.models.pair import PKCEPair
from pkce_codes.primitives.challenge import derive_challenge
from pkce_codes.primitives.verifier import generate_verifier

logger = logging.getLogger(__name__)


def generate_pair(length: int | None = None) -> PKCEPair:
    """Generate a fresh verifier and its S256 challenge.

    Call once per authorization attempt. Keep ``verifier`` for the token
    exchange and send ``challenge`` and ``method`` to the authorization
    endpoint (see :meth:`PKCEPair.authorization_params`).

    Args:
        length: Exact verifier length, random in [43, 128] when omitted

    Returns:
        PKCEPair: Immutable parameters for the authorization flow

    Raises:
        ValueError: If ``length`` is outside [43, 128]
    """
    verifier = generate_verifier(length)
    challenge = derive_challenge(verifier)

    logger.debug(f"Generated PKCE pair using {CHALLENGE_METHOD}")
    return PKCEPair(verifier=verifier, challenge=challenge, method=CHALLENGE_METHOD)
