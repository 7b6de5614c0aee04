import pytest

# RFC 7636 Appendix B
RFC_VERIFIER = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"
RFC_CHALLENGE = "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"


@pytest.fixture
def rfc_verifier() -> str:
    return RFC_VERIFIER


@pytest.fixture
def rfc_challenge() -> str:
    return RFC_CHALLENGE
