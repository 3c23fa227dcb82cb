"""
Implements the Winternitz message encoding.

A message digest is turned into the list of chain positions `b` revealed by
a signature:

1.  The digest is cut into base-w digits (the message digits).
2.  A checksum over those digits is cut into base-w digits as well and
    appended.

The checksum grows whenever a message digit shrinks. An attacker can always
walk a chain forward from a revealed value, i.e. increase message digits,
but that lowers the checksum, which would require walking a checksum chain
backwards. This is what makes forging a signature from another one hard.
"""

from __future__ import annotations

from typing import List

from .constants import LARGE_CONFIG, PROD_CONFIG, TEST_CONFIG, WotsConfig
from .types.exceptions import InvalidParameterError, MalformedInputError

CHECKSUM_BUFFER_LENGTH = 8
"""The checksum is first written into a buffer of this many bytes (a 64-bit integer)."""


def base_w(data: bytes, w: int, out_len: int | None = None) -> List[int]:
    """
    Converts a byte string into base-w digits.

    ### Algorithm

    A bit cursor walks through `data` from the most significant bit of the
    first byte. Whenever its buffer is empty it loads the next byte (8 bits),
    then each digit takes the next `log2(w)` bits.

    Args:
        data: The bytes to convert.
        w: The radix, a power of two whose logarithm divides 8.
        out_len: The number of digits to produce. Defaults to all complete
            digits of `data`; leftover bits are ignored.

    Returns:
        A list of `out_len` integers in `[0, w - 1]`, most significant first.

    Raises:
        InvalidParameterError: If `w` is not a supported radix.
        MalformedInputError: If `data` holds fewer than `out_len` digits.
    """
    log_w = w.bit_length() - 1
    if w < 2 or (w & (w - 1)) != 0 or 8 % log_w != 0:
        raise InvalidParameterError("w", w, "has to be one of 2, 4, 16 or 256")

    available = 8 * len(data) // log_w
    if out_len is None:
        out_len = available
    elif out_len > available:
        raise MalformedInputError(
            "base-w input", expected=(out_len * log_w + 7) // 8, actual=len(data)
        )

    digits: List[int] = []
    # `total` holds the last byte read, `bits` how many of its bits are unused.
    total = 0
    bits = 0
    position = 0
    for _ in range(out_len):
        if bits == 0:
            total = data[position]
            position += 1
            bits += 8
        bits -= log_w
        digits.append((total >> bits) & (w - 1))
    return digits


class WinternitzEncoder:
    """
    An instance of the message encoding for a given configuration.

    This class maps `N`-byte digests to the `LEN` chain positions of a signature.
    """

    def __init__(self, config: WotsConfig):
        """Initializes the encoder with a specific parameter set."""
        self.config = config

    def checksum(self, message_digits: List[int]) -> int:
        """
        Computes the Winternitz checksum of the message digits.

        This is `sum(W - 1 - d)`, which lies in `[0, LEN_1 * (W - 1)]`.
        """
        return sum(self.config.W - 1 - digit for digit in message_digits)

    def encode(self, digest: bytes) -> List[int]:
        """
        Encodes a message digest into the chain positions `b`.

        ### Encoding Algorithm

        1.  Convert the digest into `LEN_1` base-w message digits.
        2.  Compute the checksum `sum(W - 1 - d)` of the message digits.
        3.  Write the checksum little-endian into a 64-bit buffer, then
            zero-pad or truncate that buffer to exactly `LEN_2` bytes.
        4.  Take the first `LEN_2` base-w digits of that buffer.
        5.  Append the checksum digits to the message digits.

        ### Checksum Truncation

        The checksum digits cover only the first `LEN_2 * log2(W)` bits of the
        little-endian buffer, read most significant bit first within each byte.
        When these bits do not span every byte the checksum occupies, the
        remaining high-order checksum bits are not signed. For `N = 32, W = 4`
        the checksum needs 9 bits but only 14 bits starting at byte 0 are kept,
        so bit 8 (the lowest bit of byte 1) is dropped and the checksums `c`
        and `c - 256` encode identically. Existing signatures depend on this
        layout, so it is kept as is.

        Args:
            digest: The `N`-byte message digest.

        Returns:
            A list of `LEN` digits in `[0, W - 1]`.

        Raises:
            MalformedInputError: If the digest is not exactly `N` bytes.
        """
        config = self.config

        if len(digest) != config.N:
            raise MalformedInputError("message digest", expected=config.N, actual=len(digest))

        message_digits = base_w(digest, config.W)

        # Fixed-width little-endian buffer of exactly LEN_2 bytes.
        buffer = self.checksum(message_digits).to_bytes(CHECKSUM_BUFFER_LENGTH, "little")
        checksum_bytes = buffer[: config.LEN_2].ljust(config.LEN_2, b"\x00")

        checksum_digits = base_w(checksum_bytes, config.W, config.LEN_2)

        return message_digits + checksum_digits


PROD_ENCODER = WinternitzEncoder(PROD_CONFIG)
"""An instance configured for production-level parameters."""

TEST_ENCODER = WinternitzEncoder(TEST_CONFIG)
"""A lightweight instance for test environments."""

LARGE_ENCODER = WinternitzEncoder(LARGE_CONFIG)
"""An instance configured for the SHA-512 parameter set."""
