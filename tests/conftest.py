"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

if "WOTS_ENV" not in os.environ:
    os.environ["WOTS_ENV"] = "test"

# Create a profile named "no_deadline" with deadline disabled.
#
# Walking long hash chains makes example run times uneven.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
