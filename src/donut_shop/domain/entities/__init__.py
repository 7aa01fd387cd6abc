"""Domain entities - Card accounts and the records built around them."""

from donut_shop.domain.entities.credit_card import DEFAULT_BALANCE, CreditCard
from donut_shop.domain.entities.payment import (
    CombineResult,
    Payment,
    PaymentError,
    PaymentErrorCode,
)
from donut_shop.domain.entities.purchase import Purchase

__all__ = [
    "DEFAULT_BALANCE",
    "CombineResult",
    "CreditCard",
    "Payment",
    "PaymentError",
    "PaymentErrorCode",
    "Purchase",
]
