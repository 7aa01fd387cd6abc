"""Domain exceptions for donut-shop.

Exception hierarchy:
    DomainException (base)
    ├── Aggregation Errors
    │   └── IncompatibleCardError
    ├── Balance Errors
    │   └── InsufficientFundsError
    ├── Not Found Errors
    │   └── CardNotFoundError
    └── Validation Errors
        ├── InvalidCardIdError
        ├── InvalidAmountError
        ├── InvalidQuantityError
        └── InvalidPurchaseError
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Aggregation Errors
# =============================================================================


class IncompatibleCardError(DomainException):
    """Raised when two payments on different accounts are combined.

    Payments are compatible only when they reference the same card id.
    Payment.try_combine() reports this case as a value instead of raising.
    """


# =============================================================================
# Balance Errors
# =============================================================================


class InsufficientFundsError(DomainException):
    """Raised when a charge exceeds the card balance.

    The card balance is left untouched.
    """


# =============================================================================
# Not Found Errors
# =============================================================================


class CardNotFoundError(DomainException):
    """Raised when settlement targets a card the repository does not know."""


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidCardIdError(DomainException):
    """Raised when a card ID is not a valid UUID."""


class InvalidAmountError(DomainException):
    """Raised when a charge or payment amount is negative."""


class InvalidQuantityError(DomainException):
    """Raised when a negative donut quantity is requested."""


class InvalidPurchaseError(DomainException):
    """Raised when a purchase's payment does not match its donuts.

    Invariant: len(donuts) * Donut.PRICE == payment.amount
    """
