"""Shared helpers for the tinysha tests."""

import pytest
from cryptography.hazmat.primitives import hashes


def reference_sha256_hex(data: bytes) -> str:
    """SHA-256 from the cryptography package, used as an independent oracle."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize().hex()


def swap_hex_words(hexdigest: str) -> str:
    """Reverse the byte pairs inside every 8-char group, keeping group order."""
    groups = [hexdigest[i:i + 8] for i in range(0, len(hexdigest), 8)]
    return ''.join(
        ''.join(reversed([group[j:j + 2] for j in range(0, 8, 2)]))
        for group in groups
    )


@pytest.fixture
def reference_hex():
    return reference_sha256_hex


@pytest.fixture
def swap_words():
    return swap_hex_words
