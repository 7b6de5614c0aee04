"""Tests for the fail-safe PKCE predicates.

These predicates are called on untrusted input, so every test here also
implicitly checks that nothing is raised.
"""

import pytest

from pkce_codes.primitives.challenge import derive_challenge
from pkce_codes.primitives.verifier import generate_verifier
from pkce_codes.primitives.validation import (
    is_valid_challenge,
    is_valid_verifier,
    verify_pair,
)

NON_STRINGS = [None, 0, 12345, 1.5, True, b"A" * 43, ["A"] * 43, {"v": "A"}, object()]


class TestIsValidVerifier:
    @pytest.mark.parametrize("length", [43, 128])
    def test_accepts_boundary_lengths(self, length: int) -> None:
        assert is_valid_verifier("a" * length)

    @pytest.mark.parametrize("length", [0, 42, 129])
    def test_rejects_out_of_range_lengths(self, length: int) -> None:
        assert not is_valid_verifier("a" * length)

    def test_accepts_full_alphabet(self) -> None:
        verifier = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
        assert is_valid_verifier(verifier)

    def test_accepts_generated_verifiers(self) -> None:
        assert all(is_valid_verifier(generate_verifier()) for _ in range(100))

    @pytest.mark.parametrize("char", ["!", "+", "/", "=", " ", "\t", "é", "\x00"])
    def test_rejects_disallowed_characters(self, char: str) -> None:
        assert not is_valid_verifier("a" * 50 + char)

    @pytest.mark.parametrize("value", NON_STRINGS)
    def test_rejects_non_strings(self, value) -> None:
        assert is_valid_verifier(value) is False


class TestIsValidChallenge:
    def test_accepts_derived_challenge(self, rfc_challenge: str) -> None:
        assert is_valid_challenge(rfc_challenge)

    @pytest.mark.parametrize("length", [20, 43, 100])
    def test_accepts_lengths_within_window(self, length: int) -> None:
        assert is_valid_challenge("a" * length)

    @pytest.mark.parametrize("length", [0, 19, 101])
    def test_rejects_lengths_outside_window(self, length: int) -> None:
        assert not is_valid_challenge("a" * length)

    @pytest.mark.parametrize("char", ["+", "/", "=", " ", "\n", ".", "~"])
    def test_rejects_non_base64url_characters(self, char: str) -> None:
        assert not is_valid_challenge("a" * 42 + char)

    def test_rejects_padded_challenge(self, rfc_challenge: str) -> None:
        assert not is_valid_challenge(rfc_challenge + "=")

    def test_rejects_trailing_newline(self, rfc_challenge: str) -> None:
        assert not is_valid_challenge(rfc_challenge + "\n")

    @pytest.mark.parametrize("value", NON_STRINGS)
    def test_rejects_non_strings(self, value) -> None:
        assert is_valid_challenge(value) is False


class TestVerifyPair:
    def test_rfc_vector(self, rfc_verifier: str, rfc_challenge: str) -> None:
        assert verify_pair(rfc_verifier, rfc_challenge) is True

    def test_round_trip(self) -> None:
        verifier = generate_verifier()
        assert verify_pair(verifier, derive_challenge(verifier)) is True

    def test_mismatched_pair(self) -> None:
        # Arrange
        v1 = generate_verifier()
        v2 = generate_verifier()

        # Act / Assert
        assert v1 != v2
        assert verify_pair(v1, derive_challenge(v2)) is False

    def test_invalid_verifier_returns_false(self, rfc_challenge: str) -> None:
        assert verify_pair("too-short", rfc_challenge) is False
        assert verify_pair("", rfc_challenge) is False
        assert verify_pair("!" * 43, rfc_challenge) is False

    def test_verifier_used_as_its_own_challenge(self, rfc_verifier: str) -> None:
        assert verify_pair(rfc_verifier, rfc_verifier) is False

    @pytest.mark.parametrize("value", NON_STRINGS)
    def test_non_string_verifier_returns_false(self, value, rfc_challenge: str) -> None:
        assert verify_pair(value, rfc_challenge) is False

    @pytest.mark.parametrize("value", NON_STRINGS + ["", "é" * 43, "x" * 500])
    def test_malformed_challenge_returns_false(self, value, rfc_verifier: str) -> None:
        assert verify_pair(rfc_verifier, value) is False
