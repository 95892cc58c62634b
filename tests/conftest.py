"""Pytest configuration and fixtures."""

import random

import pytest


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(seed: int) -> random.Random:
    """Seeded random source."""
    return random.Random(seed)


@pytest.fixture
def sample_account_id() -> str:
    """Sample account ID."""
    return "acct-test-001"
