"""Shared pytest fixtures for the test suite."""

import pytest

from donut_shop.domain.entities import CreditCard
from donut_shop.infrastructure.card_repository import InMemoryCardRepository
from donut_shop.infrastructure.lock_provider import InMemoryLockProvider


@pytest.fixture
def card() -> CreditCard:
    """A card with the default opening balance of 50."""
    return CreditCard(50)


@pytest.fixture
def other_card() -> CreditCard:
    """A second, unrelated card account."""
    return CreditCard(50)


@pytest.fixture
def card_repository() -> InMemoryCardRepository:
    return InMemoryCardRepository()


@pytest.fixture
def lock_provider() -> InMemoryLockProvider:
    """An in-memory lock provider for testing."""
    return InMemoryLockProvider()
