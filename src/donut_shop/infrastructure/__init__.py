"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Card storage: In-memory card repository
- Locking: Per-card lock providers

Infrastructure adapters implement the ports defined in the application layer.
"""

from donut_shop.infrastructure.card_repository import InMemoryCardRepository
from donut_shop.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider

__all__ = [
    "InMemoryCardRepository",
    "InMemoryLockProvider",
    "NoOpLockProvider",
]
