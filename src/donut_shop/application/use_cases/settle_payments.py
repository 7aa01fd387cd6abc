from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from donut_shop.domain.entities import Payment
from donut_shop.domain.exceptions import CardNotFoundError, InsufficientFundsError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from donut_shop.application.ports import CardRepository, LockProvider
    from donut_shop.domain.entities import Purchase
    from donut_shop.domain.value_objects import CardId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SettlePaymentsRequest:
    """Input DTO for settle payments use case."""

    payments: tuple[Payment, ...]


@dataclass(frozen=True, slots=True)
class SettledCharge:
    """One card charged once for the sum of its payments."""

    card_id: CardId
    amount: int
    balance_after: int


@dataclass(frozen=True, slots=True)
class SettlePaymentsResponse:
    """Output DTO for settle payments use case."""

    charges: tuple[SettledCharge, ...]

    @property
    def total(self) -> int:
        return sum(charge.amount for charge in self.charges)


def request_from_purchases(purchases: Iterable[Purchase]) -> SettlePaymentsRequest:
    """Collect the payments of several purchases into one settlement request."""
    return SettlePaymentsRequest(payments=tuple(purchase.payment for purchase in purchases))


class SettlePaymentsUseCase:
    """Charges each card once for all of its outstanding payments.

    Payments are folded per card with Payment.group_by_card(), then each
    combined payment is charged while holding that card's lock. Cards are
    settled independently: if one card fails, cards already charged in the
    same call stay charged and the error propagates.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        card_repository: CardRepository,
    ) -> None:
        self._lock_provider = lock_provider
        self._card_repo = card_repository

    def execute(self, request: SettlePaymentsRequest) -> SettlePaymentsResponse:
        """Execute the settlement.

        Args:
            request: The payments to settle, possibly spanning several cards.

        Returns:
            SettlePaymentsResponse with one SettledCharge per distinct card.

        Raises:
            CardNotFoundError: A payment references an unknown card.
            InsufficientFundsError: A card cannot cover its combined payment.
        """
        charges = []
        for payment in Payment.group_by_card(request.payments):
            with self._lock_provider.acquire(str(payment.card_id.value)):
                charges.append(self._charge_within_lock(payment))

        return SettlePaymentsResponse(charges=tuple(charges))

    def _charge_within_lock(self, payment: Payment) -> SettledCharge:
        """Load, charge and save one card inside its critical section."""
        card = self._card_repo.get(payment.card_id)
        if card is None:
            raise CardNotFoundError(f"Card not found: {payment.card_id.value}")

        try:
            card.charge(payment.amount)
        except InsufficientFundsError:
            logger.warning(
                "Insufficient funds",
                extra={
                    "card_id": str(payment.card_id),
                    "amount": payment.amount,
                    "balance": card.balance,
                },
            )
            raise

        self._card_repo.save(card)

        logger.info(
            "Card charged",
            extra={
                "card_id": str(payment.card_id),
                "amount": payment.amount,
                "balance_after": card.balance,
            },
        )
        return SettledCharge(
            card_id=payment.card_id,
            amount=payment.amount,
            balance_after=card.balance,
        )
