"""
Global configuration for the WOTS specification.

This module contains environment-specific settings that apply across the package.
"""

import os

_SUPPORTED_WOTS_ENVS: list[str] = ["prod", "test"]

WOTS_ENV = os.environ.get("WOTS_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if WOTS_ENV not in _SUPPORTED_WOTS_ENVS:
    raise ValueError(
        f"Invalid WOTS_ENV environment variable: '{WOTS_ENV}'. "
        f"Supported values: {_SUPPORTED_WOTS_ENVS}"
    )
