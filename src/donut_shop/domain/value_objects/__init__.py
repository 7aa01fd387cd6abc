"""Value objects - Immutable objects defined by their attributes."""

from donut_shop.domain.value_objects.card_id import CardId
from donut_shop.domain.value_objects.donut import DONUT_PRICE, Donut

__all__ = [
    "DONUT_PRICE",
    "CardId",
    "Donut",
]
