"""Use cases - Application workflows built on the domain model."""

from donut_shop.application.use_cases.settle_payments import (
    SettledCharge,
    SettlePaymentsRequest,
    SettlePaymentsResponse,
    SettlePaymentsUseCase,
    request_from_purchases,
)

__all__ = [
    "SettledCharge",
    "SettlePaymentsRequest",
    "SettlePaymentsResponse",
    "SettlePaymentsUseCase",
    "request_from_purchases",
]
