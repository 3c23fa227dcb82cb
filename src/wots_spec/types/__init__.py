"""Reusable type definitions for the Winternitz one-time signature scheme."""

from .base import StrictBaseModel
from .byte_arrays import SegmentedBytes
from .exceptions import (
    InvalidParameterError,
    MalformedInputError,
    WotsError,
)

__all__ = [
    # Core types
    "SegmentedBytes",
    "StrictBaseModel",
    # Exceptions
    "WotsError",
    "InvalidParameterError",
    "MalformedInputError",
]
