"""
Defines the pseudorandom function (PRF) used in the signature scheme.

The PRF hashes a key together with an `N`-byte input:

    PRF(key, input) = H(key || input)

where `H` is the hash core for the security parameter `N`.

It is used for exactly one purpose: expanding the caller's master key into
the secret starting points of the `LEN` hash chains. Chain evaluation never
goes through the PRF.
"""

from __future__ import annotations

from pydantic import model_validator

from ._validation import enforce_strict_types
from .constants import LARGE_CONFIG, PROD_CONFIG, TEST_CONFIG, WotsConfig
from .containers import SecretKey
from .hashing import core_hash
from .types import SegmentedBytes, StrictBaseModel
from .types.exceptions import MalformedInputError


class Prf(StrictBaseModel):
    """An instance of the hash-based PRF for a given config."""

    config: WotsConfig
    """Configuration parameters for the PRF."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "Prf":
        """Reject subclasses to prevent type confusion attacks."""
        enforce_strict_types(self, config=WotsConfig)
        return self

    def address(self, chain_index: int) -> bytes:
        """
        Encodes a chain index into the `N`-byte PRF input.

        The index is written big-endian, so every chain of a key pair gets a
        distinct input.
        """
        return chain_index.to_bytes(self.config.N, "big")

    def apply(self, key: bytes, chain_index: int) -> bytes:
        """
        Derives the secret starting value of a single hash chain.

        ### PRF Construction

        `H(key || address(chain_index))`: the key comes first, then the
        index-derived input. The same `(key, chain_index)` pair always gives
        the same output.

        Args:
            key: The `N`-byte master key.
            chain_index: The index of the hash chain (0 to LEN-1).

        Returns:
            The `N`-byte secret start of the chain.
        """
        return core_hash(bytes(key) + self.address(chain_index), self.config.N)

    def expand(self, master_key: bytes) -> SecretKey:
        """
        Expands a master key into a full secret key.

        Args:
            master_key: The `N`-byte master key. It MUST be uniformly random.

        Returns:
            The `LEN` chain starting values, concatenated in index order.

        Raises:
            MalformedInputError: If the master key does not decode to exactly `N` bytes.
        """
        config = self.config

        master_key = bytes(SegmentedBytes(master_key))
        if len(master_key) != config.N:
            raise MalformedInputError("master key", expected=config.N, actual=len(master_key))

        return SecretKey.from_segments(
            self.apply(master_key, chain_index) for chain_index in range(config.LEN)
        )


PROD_PRF = Prf(config=PROD_CONFIG)
"""An instance configured for production-level parameters."""

TEST_PRF = Prf(config=TEST_CONFIG)
"""A lightweight instance for test environments."""

LARGE_PRF = Prf(config=LARGE_CONFIG)
"""An instance configured for the SHA-512 parameter set."""
