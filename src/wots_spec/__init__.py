"""
This package provides a Python specification for the Winternitz One-Time
Signature (WOTS) scheme.

It exposes the parameter sets, the data containers and the main interface
functions.
"""

from .constants import (
    LARGE_CONFIG,
    PROD_CONFIG,
    TARGET_CONFIG,
    TEST_CONFIG,
    WotsConfig,
    derive_parameters,
)
from .containers import PublicKey, SecretKey, Signature
from .interface import (
    TARGET_SIGNATURE_SCHEME,
    WinternitzScheme,
    generate_key_pair,
    sign,
    verify,
)
from .types.exceptions import InvalidParameterError, MalformedInputError, WotsError

__all__ = [
    "WinternitzScheme",
    "WotsConfig",
    "derive_parameters",
    "generate_key_pair",
    "sign",
    "verify",
    "PublicKey",
    "Signature",
    "SecretKey",
    "WotsError",
    "InvalidParameterError",
    "MalformedInputError",
    "PROD_CONFIG",
    "TEST_CONFIG",
    "LARGE_CONFIG",
    "TARGET_CONFIG",
    "TARGET_SIGNATURE_SCHEME",
]
