"""
Byte array types.

Keys and signatures of the scheme are flat byte strings made of equally
sized segments. `SegmentedBytes` is the immutable `bytes` subclass they all
derive from.
"""

from __future__ import annotations

from typing import Any, Iterable

from typing_extensions import Self

from .exceptions import MalformedInputError


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` / `memoryview` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        # bytes.fromhex handles empty string and validates hex characters
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    return bytes(value)


class SegmentedBytes(bytes):
    """
    A byte buffer made of back-to-back segments of a common size.

    Segment `i` belongs to hash chain `i`, in ascending order. The segment
    size is not part of the type since it depends on the parameter set.
    """

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create a new instance.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).
        """
        return super().__new__(cls, _coerce_to_bytes(value))

    @classmethod
    def from_segments(cls, segments: Iterable[bytes]) -> Self:
        """Concatenate `segments` in order into a single buffer."""
        return cls(b"".join(segments))

    def segments(self, size: int) -> list[bytes]:
        """
        Split the buffer into consecutive segments of `size` bytes.

        Raises:
            MalformedInputError: If the buffer length is not a multiple of `size`.
        """
        if size <= 0 or len(self) % size != 0:
            raise MalformedInputError(
                type(self).__name__, expected=size, actual=len(self), is_multiple=True
            )
        raw = bytes(self)
        return [raw[i : i + size] for i in range(0, len(raw), size)]

    def __repr__(self) -> str:
        """Return a short representation: full keys run to several kilobytes."""
        return f"{type(self).__name__}(len={len(self)}, {bytes(self[:8]).hex()}...)"

    def __hash__(self) -> int:
        """Return the hash of the bytes, keyed by type."""
        return hash((type(self), bytes(self)))
