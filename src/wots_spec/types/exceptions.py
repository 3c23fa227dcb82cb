"""Exception hierarchy for the Winternitz one-time signature scheme."""

from __future__ import annotations

from typing import Any


class WotsError(Exception):
    """
    Base exception for all WOTS-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidParameterError(WotsError):
    """
    Raised when a parameter set cannot be instantiated.

    This is only ever raised while deriving parameters (or selecting the hash
    function for a digest size). No partially built parameter object escapes.

    Attributes:
        parameter: The name of the rejected parameter (e.g. "n" or "w").
        value: The rejected value.
        reason: Why the value was rejected.
    """

    def __init__(self, parameter: str, value: Any, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason

        super().__init__(f"Invalid parameter {parameter}={value!r}: {reason}")


class MalformedInputError(WotsError):
    """
    Raised when a byte buffer does not have the size the parameter set demands.

    Verification never raises this; a wrongly sized public key or signature
    simply does not verify.

    Attributes:
        name: What the buffer is (e.g. "master key", "secret key").
        expected: The expected size in bytes (exact, or a required multiple).
        actual: The actual size in bytes.
        is_multiple: True if `expected` is a segment size the length must divide by.
    """

    def __init__(
        self,
        name: str,
        *,
        expected: int,
        actual: int,
        is_multiple: bool = False,
    ) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        self.is_multiple = is_multiple

        if is_multiple:
            msg = f"{name} length must be a multiple of {expected} bytes, got {actual}"
        else:
            msg = f"{name} requires exactly {expected} bytes, got {actual}"

        super().__init__(msg)
