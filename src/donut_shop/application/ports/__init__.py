"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from donut_shop.application.ports.card_repository import CardRepository
from donut_shop.application.ports.lock_provider import LockProvider

__all__ = [
    "CardRepository",
    "LockProvider",
]
