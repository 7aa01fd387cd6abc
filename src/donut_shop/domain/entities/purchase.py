from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from donut_shop.domain.exceptions import InvalidPurchaseError
from donut_shop.domain.value_objects import Donut

if TYPE_CHECKING:
    from donut_shop.domain.entities.payment import Payment


@dataclass(frozen=True, slots=True)
class Purchase:
    """Donuts bought together with the payment that covers them.

    Invariant: len(donuts) * Donut.PRICE == payment.amount
    """

    donuts: tuple[Donut, ...]
    payment: Payment

    def __post_init__(self) -> None:
        if not isinstance(self.donuts, tuple):
            object.__setattr__(self, "donuts", tuple(self.donuts))

        expected = len(self.donuts) * Donut.PRICE
        if self.payment.amount != expected:
            raise InvalidPurchaseError(
                f"Payment of {self.payment.amount} does not cover "
                f"{len(self.donuts)} donuts at {Donut.PRICE} (expected {expected})"
            )

    @property
    def quantity(self) -> int:
        return len(self.donuts)
