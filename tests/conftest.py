"""Shared pytest fixtures."""

import pytest

from etag import TagHasher, create_hasher


@pytest.fixture
def hasher() -> TagHasher:
    """Create a fixed-key hasher distinct from the default one."""
    return create_hasher(key=b"test-key")


@pytest.fixture
def random_hasher() -> TagHasher:
    """Create a fresh randomized hasher for each test."""
    return create_hasher(randomized=True)
