"""
Shared pytest fixtures for the WOTS tests.

Key generation walks every chain to its end, so key pairs used by many tests
are built once per module.
"""

from __future__ import annotations

import pytest

from wots_spec.containers import PublicKey, SecretKey
from wots_spec.interface import TEST_SIGNATURE_SCHEME, WinternitzScheme


@pytest.fixture(scope="module")
def scheme() -> WinternitzScheme:
    """The lightweight test scheme (n=32, w=4)."""
    return TEST_SIGNATURE_SCHEME


@pytest.fixture(scope="module")
def key_pair(scheme: WinternitzScheme) -> tuple[SecretKey, PublicKey]:
    """A key pair derived from the master key 0x00, 0x01, ..., 0x1f."""
    return scheme.key_gen(bytes(range(32)))


@pytest.fixture(scope="module")
def other_key_pair(scheme: WinternitzScheme) -> tuple[SecretKey, PublicKey]:
    """A second, unrelated key pair."""
    return scheme.key_gen(b"\xa5" * 32)
