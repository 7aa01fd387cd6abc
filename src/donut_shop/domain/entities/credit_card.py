from __future__ import annotations

from dataclasses import dataclass, field

from donut_shop.domain.exceptions import InsufficientFundsError, InvalidAmountError
from donut_shop.domain.value_objects import CardId

DEFAULT_BALANCE = 50


@dataclass(eq=False, slots=True)
class CreditCard:
    """Credit card account holding a mutable balance.

    This is the only mutable object in the domain. Equality is object
    identity; use ``id`` to decide whether two objects are the same account.

    Not safe for concurrent mutation. Callers serialize charges on the same
    card through a LockProvider (see SettlePaymentsUseCase).
    """

    balance: int = DEFAULT_BALANCE
    id: CardId = field(default_factory=CardId.generate)

    def can_charge(self, amount: int) -> bool:
        """Check whether ``amount`` could be charged without raising."""
        return 0 <= amount <= self.balance

    def charge(self, amount: int) -> None:
        """Decrease the balance by ``amount``.

        Args:
            amount: Amount to charge. Zero is allowed.

        Raises:
            InvalidAmountError: If amount < 0.
            InsufficientFundsError: If amount > balance.
        """
        if amount < 0:
            raise InvalidAmountError(f"Charge amount must not be negative, got {amount}")

        if amount > self.balance:
            raise InsufficientFundsError(
                f"Cannot charge {amount} to card {self.id}; balance is {self.balance}"
            )

        self.balance -= amount
