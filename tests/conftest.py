"""
Pytest configuration for quickcheck tests.

Provides:
- Hypothesis profiles for the meta-property tests
- Seeded random handles so engine runs are reproducible
- A registry guard for tests that register their own strategies
"""

import os
import random

import pytest
from hypothesis import settings

from quickcheck import arbitrary

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - print_blob=True makes failures easy to reproduce
# - "ci" runs more examples; select with HYPOTHESIS_PROFILE=ci

settings.register_profile(
    "default",
    print_blob=True,
    derandomize=False,
)

settings.register_profile(
    "ci",
    print_blob=True,
    derandomize=False,
    max_examples=500,
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def rng():
    """A seeded generator; each test gets the same stream."""
    return random.Random(20130725)


@pytest.fixture
def clean_registry():
    """Snapshot the type registry and restore it after the test."""
    saved = dict(arbitrary._REGISTRY)
    yield
    arbitrary._REGISTRY.clear()
    arbitrary._REGISTRY.update(saved)
