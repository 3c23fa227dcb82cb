"""
Defines the hash core and the hash-chain evaluator.

The whole scheme runs on a single hash function whose digest size equals the
security parameter `N`:

- `N = 32` uses SHA-256,
- `N = 64` uses SHA-512.

The digest is always used in full. Selection is a closed enumeration over
these two sizes.

### Hash Chains

A chain starts at a secret `N`-byte value and repeatedly hashes it. Position
`k` of the chain is the start value hashed `k` times. The public key holds
position `W - 1` of each chain; a signature reveals position `b_i`, where
`b_i` is the `i`-th base-w digit of the encoded message.
"""

from __future__ import annotations

import hashlib
from enum import IntEnum

from pydantic import model_validator

from ._validation import enforce_strict_types
from .constants import LARGE_CONFIG, PROD_CONFIG, TEST_CONFIG, WotsConfig
from .types import StrictBaseModel
from .types.exceptions import InvalidParameterError


class HashFunction(IntEnum):
    """The hash functions of the scheme, keyed by digest size in bytes."""

    SHA256 = 32
    SHA512 = 64

    @classmethod
    def for_size(cls, n: int) -> "HashFunction":
        """
        Select the hash function producing `n`-byte digests.

        Validated parameter sets never reach the error branch.

        Raises:
            InvalidParameterError: If no hash function has an `n`-byte digest.
        """
        try:
            return cls(n)
        except ValueError:
            raise InvalidParameterError("n", n, "no hash function with this digest size") from None

    def digest(self, data: bytes) -> bytes:
        """Hash `data` and return the full digest."""
        if self is HashFunction.SHA256:
            return hashlib.sha256(data).digest()
        return hashlib.sha512(data).digest()


def core_hash(data: bytes, n: int) -> bytes:
    """
    Hash an arbitrary byte string to an `n`-byte digest.

    Args:
        data: The bytes to hash.
        n: The digest size in bytes, 32 or 64.

    Returns:
        The `n`-byte digest.
    """
    return HashFunction.for_size(n).digest(data)


class ChainHasher(StrictBaseModel):
    """An instance of the hash core and chain evaluator for a given config."""

    config: WotsConfig
    """Configuration parameters for the hasher."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "ChainHasher":
        """Reject subclasses to prevent type confusion attacks."""
        enforce_strict_types(self, config=WotsConfig)
        return self

    @property
    def hash_function(self) -> HashFunction:
        """The hash function selected by the security parameter."""
        return HashFunction.for_size(self.config.N)

    def apply(self, data: bytes) -> bytes:
        """Hash `data` to an `N`-byte digest."""
        return self.hash_function.digest(data)

    def hash_chain(self, start_digest: bytes, start_step: int, num_steps: int) -> bytes:
        """
        Walks a hash chain from `start_digest`.

        The seed is hashed `start_step + num_steps` times, capped at `W`
        applications. The cap bounds the work per chain no matter what the
        caller asks for.

        Args:
            start_digest: The `N`-byte value to begin hashing from.
            start_step: The chain position the walk is counted from.
            num_steps: The number of steps to walk.

        Returns:
            The `N`-byte digest after all applications.
        """
        hash_function = self.hash_function
        num_applications = min(start_step + num_steps, self.config.W)

        current_digest = bytes(start_digest)
        for _ in range(num_applications):
            current_digest = hash_function.digest(current_digest)
        return current_digest


PROD_CHAIN_HASHER = ChainHasher(config=PROD_CONFIG)
"""An instance configured for production-level parameters."""

TEST_CHAIN_HASHER = ChainHasher(config=TEST_CONFIG)
"""A lightweight instance for test environments."""

LARGE_CHAIN_HASHER = ChainHasher(config=LARGE_CONFIG)
"""An instance configured for the SHA-512 parameter set."""
