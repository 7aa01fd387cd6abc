"""Purchase builder.

buy_donuts() only describes the purchase: it returns the Payment owed and
leaves the card alone. Charging is done later, once per card, by
SettlePaymentsUseCase.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from donut_shop.domain.entities.payment import Payment
from donut_shop.domain.entities.purchase import Purchase
from donut_shop.domain.exceptions import InvalidQuantityError
from donut_shop.domain.value_objects import Donut

if TYPE_CHECKING:
    from donut_shop.domain.entities.credit_card import CreditCard


def buy_donuts(credit: CreditCard, quantity: int = 1) -> Purchase:
    """Build a purchase of ``quantity`` donuts paid with ``credit``.

    Args:
        credit: Card the payment is drawn on. Its balance is not touched.
        quantity: Number of donuts. Zero yields an empty purchase.

    Returns:
        Purchase holding the donuts and a Payment of Donut.PRICE * quantity.

    Raises:
        InvalidQuantityError: If quantity < 0.
    """
    if quantity < 0:
        raise InvalidQuantityError(f"Quantity must not be negative, got {quantity}")

    return Purchase(
        donuts=tuple(Donut() for _ in range(quantity)),
        payment=Payment(card=credit, amount=Donut.PRICE * quantity),
    )
