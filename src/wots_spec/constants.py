"""
Defines the parameter sets and configuration presets of the WOTS scheme.

A parameter set is fixed by two user-supplied values:

- `N`, the security parameter in bytes. It sets the size of every chain
  element and selects the hash function (SHA-256 for 32, SHA-512 for 64).
- `W`, the Winternitz parameter. It trades signature size against the
  number of hash evaluations per chain.

Every other length is derived from these two and never changes afterwards.
"""

import math

from pydantic import BaseModel, ConfigDict, model_validator
from typing_extensions import Final

from .config import WOTS_ENV
from .types.exceptions import InvalidParameterError

SUPPORTED_SECURITY_PARAMETERS: Final = (32, 64)
"""The allowed values of `N`, in bytes."""

SUPPORTED_LOG_W: Final = (1, 2, 4, 8)
"""
The allowed values of `log2(W)`.

Base-w digits are cut from whole bytes, so `log2(W)` has to divide 8.
"""


class WotsConfig(BaseModel):
    """
    A model holding one WOTS parameter set.

    Instances only exist for valid parameters: construction raises
    `InvalidParameterError` otherwise.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    N: int
    """The security parameter: size in bytes of digests and chain elements."""

    W: int
    """The Winternitz parameter: chain length and digit radix."""

    @model_validator(mode="after")
    def _check_parameters(self) -> "WotsConfig":
        """Reject parameter sets the scheme cannot instantiate."""
        # A power of two has a single bit set, so clearing its lowest bit gives 0.
        if self.W <= 0 or (self.W & (self.W - 1)) != 0:
            raise InvalidParameterError("w", self.W, "has to be a power of 2")

        if self.W.bit_length() - 1 not in SUPPORTED_LOG_W:
            raise InvalidParameterError("w", self.W, "has to be one of 2, 4, 16 or 256")

        if self.N not in SUPPORTED_SECURITY_PARAMETERS:
            raise InvalidParameterError("n", self.N, "has to be 32 or 64")

        return self

    @property
    def LOG_W(self) -> int:  # noqa: N802
        """The number of bits encoded by one base-w digit."""
        return self.W.bit_length() - 1

    @property
    def LEN_1(self) -> int:  # noqa: N802
        """The number of base-w digits of an `N`-byte message digest."""
        return math.ceil(8 * self.N / self.LOG_W)

    @property
    def LEN_2(self) -> int:  # noqa: N802
        """
        The number of base-w digits of the checksum.

        The checksum is bounded by `LEN_1 * (W - 1)`.
        """
        return math.floor(math.log2(self.LEN_1 * (self.W - 1) // self.LOG_W + 1))

    @property
    def LEN(self) -> int:  # noqa: N802
        """The total number of hash chains, i.e. of segments per key and signature."""
        return self.LEN_1 + self.LEN_2

    @property
    def KEY_SIZE(self) -> int:  # noqa: N802
        """The size in bytes of a secret key, a public key, or a signature."""
        return self.N * self.LEN


def derive_parameters(n: int, w: int) -> WotsConfig:
    """
    Derive the full parameter set for security parameter `n` and Winternitz parameter `w`.

    Args:
        n: The security parameter in bytes (32 or 64).
        w: The Winternitz parameter (a power of two).

    Returns:
        The immutable parameter set.

    Raises:
        InvalidParameterError: If `w` is not a supported power of two or `n` is unsupported.
    """
    return WotsConfig(N=n, W=w)


PROD_CONFIG: Final = WotsConfig(N=32, W=16)
"""The default parameter set: SHA-256 with 71 chains of length 16."""

TEST_CONFIG: Final = WotsConfig(N=32, W=4)
"""A parameter set with short chains, for test environments."""

LARGE_CONFIG: Final = WotsConfig(N=64, W=16)
"""A parameter set with a 512-bit classical security level, based on SHA-512."""

TARGET_CONFIG: Final = TEST_CONFIG if WOTS_ENV == "test" else PROD_CONFIG
"""The parameter set selected by the `WOTS_ENV` environment variable."""
