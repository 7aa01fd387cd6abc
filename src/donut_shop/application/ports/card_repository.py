from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from donut_shop.domain.entities import CreditCard
    from donut_shop.domain.value_objects import CardId


class CardRepository(ABC):
    """Port for credit card account storage.

    Contract:
    - get() returns None if the card does not exist (no exception)
    - save() performs upsert: creates if new, updates the balance if it exists
    - Implementations are NOT thread-safe; callers must serialize per card
      via LockProvider before a get/charge/save sequence
    """

    @abstractmethod
    def get(self, card_id: CardId) -> CreditCard | None:
        """Retrieve a card by ID.

        Args:
            card_id: The card identifier.

        Returns:
            The CreditCard if found, None otherwise.
            Returned card is a copy; charging it does not affect stored state
            until it is saved.
        """

    @abstractmethod
    def save(self, card: CreditCard) -> None:
        """Persist a card (upsert semantics).

        Args:
            card: The card to save, keyed by card.id.
        """
