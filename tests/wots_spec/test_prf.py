"""Tests for the hash-based pseudorandom function (PRF)."""

import hashlib

import pytest

from wots_spec.constants import LARGE_CONFIG, TEST_CONFIG, derive_parameters
from wots_spec.containers import SecretKey
from wots_spec.prf import LARGE_PRF, TEST_PRF, Prf
from wots_spec.types.exceptions import MalformedInputError


def test_apply_hashes_key_then_address() -> None:
    """The PRF is `H(key || address)` with the key first."""
    key = bytes(range(32))
    expected = hashlib.sha256(key + (5).to_bytes(32, "big")).digest()
    assert TEST_PRF.apply(key, 5) == expected


def test_address_is_n_bytes_big_endian() -> None:
    """Chain indices are written big-endian into exactly `N` bytes."""
    assert TEST_PRF.address(0) == bytes(32)
    assert TEST_PRF.address(1) == bytes(31) + b"\x01"
    assert TEST_PRF.address(256) == bytes(30) + b"\x01\x00"
    assert len(LARGE_PRF.address(300)) == 64


def test_apply_is_deterministic() -> None:
    """Identical inputs always give identical outputs."""
    key = b"\x11" * 32
    assert TEST_PRF.apply(key, 3) == TEST_PRF.apply(key, 3)


def test_apply_is_sensitive_to_inputs() -> None:
    """
    Tests that changing any input to `apply` results in a different output.

    This confirms that both the key and the chain index are absorbed by the hash.
    """
    key1 = b"\x11" * 32
    baseline_output = TEST_PRF.apply(key1, 20)
    assert len(baseline_output) == TEST_CONFIG.N

    # Test sensitivity to the key.
    key2 = b"\x22" * 32
    assert TEST_PRF.apply(key2, 20) != baseline_output

    # Test sensitivity to the chain index.
    assert TEST_PRF.apply(key1, 21) != baseline_output


def test_large_prf_uses_sha512() -> None:
    """With n=64 the PRF output is a 64-byte SHA-512 digest."""
    key = b"\x33" * 64
    output = LARGE_PRF.apply(key, 0)
    assert output == hashlib.sha512(key + bytes(64)).digest()
    assert len(output) == LARGE_CONFIG.N


def test_expand_produces_one_segment_per_chain() -> None:
    """`expand` concatenates `apply` over all chain indices."""
    master_key = bytes(range(32))
    sk = TEST_PRF.expand(master_key)

    assert isinstance(sk, SecretKey)
    assert len(sk) == TEST_CONFIG.KEY_SIZE

    segments = sk.segments(TEST_CONFIG.N)
    assert len(segments) == TEST_CONFIG.LEN
    for chain_index in (0, 1, TEST_CONFIG.LEN_1, TEST_CONFIG.LEN - 1):
        assert segments[chain_index] == TEST_PRF.apply(master_key, chain_index)

    # Every chain gets its own secret.
    assert len(set(segments)) == TEST_CONFIG.LEN


def test_long_expansions_have_distinct_segments() -> None:
    """Keys with more than 256 chains still never repeat a segment."""
    # n=32, w=2 has 264 chains, beyond a single index byte.
    prf = Prf(config=derive_parameters(32, 2))
    sk = prf.expand(b"\x44" * 32)
    segments = sk.segments(32)
    assert len(segments) == 264
    assert len(set(segments)) == 264


@pytest.mark.parametrize("size", [0, 31, 33, 64])
def test_expand_rejects_wrong_master_key_size(size: int) -> None:
    """The master key must be exactly `N` bytes."""
    with pytest.raises(MalformedInputError, match="master key requires exactly 32 bytes"):
        TEST_PRF.expand(b"\x00" * size)


def test_expand_decodes_hex_master_key() -> None:
    """A hex master key is decoded before its size is checked."""
    master_key = bytes(range(32))
    assert TEST_PRF.expand(master_key.hex()) == TEST_PRF.expand(master_key)

    with pytest.raises(MalformedInputError, match="master key requires exactly 32 bytes, got 16"):
        TEST_PRF.expand(master_key[:16].hex())
