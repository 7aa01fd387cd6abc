from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from donut_shop.application.ports import CardRepository

if TYPE_CHECKING:
    from donut_shop.domain.entities import CreditCard
    from donut_shop.domain.value_objects import CardId


class InMemoryCardRepository(CardRepository):
    """In-memory card repository.

    Implementation notes:
    - Uses dict with CardId as key (CardId is a frozen dataclass)
    - Returns deep copies from get(), so a charge is not visible until save()
    - Stores deep copies in save() to prevent external mutation
    - NOT thread-safe; relies on external LockProvider for serialization
    """

    def __init__(self) -> None:
        self._cards: dict[CardId, CreditCard] = {}

    def get(self, card_id: CardId) -> CreditCard | None:
        card = self._cards.get(card_id)
        if card is None:
            return None
        return copy.deepcopy(card)

    def save(self, card: CreditCard) -> None:
        self._cards[card.id] = copy.deepcopy(card)
