"""Payment value object and payment aggregation.

A Payment records an amount owed by one card. Payments are folded together
per card before anything is charged, so charging happens once per account.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING

from donut_shop.domain.exceptions import IncompatibleCardError, InvalidAmountError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from donut_shop.domain.entities.credit_card import CreditCard
    from donut_shop.domain.value_objects import CardId


class PaymentErrorCode(Enum):
    """Failure kinds reported by Payment.try_combine()."""

    INCOMPATIBLE_CARD = "incompatible_card"


@dataclass(frozen=True, slots=True)
class PaymentError:
    code: PaymentErrorCode
    message: str


@dataclass(frozen=True, slots=True)
class CombineResult:
    """Outcome of Payment.try_combine(): exactly one of payment or error is set."""

    payment: Payment | None
    error: PaymentError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Payment:
        """Return the combined payment.

        Raises:
            IncompatibleCardError: If the combination failed.
        """
        if self.payment is None:
            message = self.error.message if self.error is not None else "no payment"
            raise IncompatibleCardError(message)
        return self.payment


@dataclass(frozen=True, slots=True)
class Payment:
    """Immutable record of an amount charged to a specific card.

    The card is referenced, never mutated. Two payments are compatible
    when they reference the same account (equal card ids).
    """

    card: CreditCard
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise InvalidAmountError(f"Payment amount must not be negative, got {self.amount}")

    @property
    def card_id(self) -> CardId:
        return self.card.id

    def is_compatible_with(self, other: Payment) -> bool:
        return self.card_id == other.card_id

    def combine(self, other: Payment) -> Payment:
        """Sum two payments on the same card.

        Args:
            other: Payment to fold into this one.

        Returns:
            New Payment on the same card with the summed amount.

        Raises:
            IncompatibleCardError: If the payments reference different cards.
        """
        if not self.is_compatible_with(other):
            raise IncompatibleCardError(_incompatible_message(self, other))

        return Payment(card=self.card, amount=self.amount + other.amount)

    def try_combine(self, other: Payment) -> CombineResult:
        """Like combine(), but reports incompatible cards as a value."""
        if not self.is_compatible_with(other):
            error = PaymentError(
                code=PaymentErrorCode.INCOMPATIBLE_CARD,
                message=_incompatible_message(self, other),
            )
            return CombineResult(payment=None, error=error)

        return CombineResult(payment=self.combine(other), error=None)

    @staticmethod
    def group_by_card(payments: Iterable[Payment]) -> list[Payment]:
        """Fold payments into one Payment per distinct card.

        Groups are returned in order of first appearance; callers should
        not depend on that order.
        """
        groups: dict[CardId, list[Payment]] = {}
        for payment in payments:
            groups.setdefault(payment.card_id, []).append(payment)

        return [reduce(Payment.combine, group) for group in groups.values()]


def _incompatible_message(left: Payment, right: Payment) -> str:
    return f"Cannot combine payments on different cards: {left.card_id} and {right.card_id}"
