"""Command-line checkout.

Buys donuts on a single card, settles the resulting payments and prints a
JSON summary to stdout. Logs go to stderr so stdout stays parseable.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import typer

from donut_shop.application.use_cases import (
    SettlePaymentsResponse,
    SettlePaymentsUseCase,
    request_from_purchases,
)
from donut_shop.config import Settings
from donut_shop.domain.entities import CreditCard, Purchase
from donut_shop.domain.exceptions import DomainException
from donut_shop.domain.purchasing import buy_donuts
from donut_shop.domain.value_objects import CardId
from donut_shop.infrastructure import (
    InMemoryCardRepository,
    InMemoryLockProvider,
    NoOpLockProvider,
)
from donut_shop.observability.logging import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="donut-shop",
    help="Buy donuts on one card and settle the payments",
    add_completion=False,
)


def _summary(
    card: CreditCard,
    opening_balance: int,
    purchases: list[Purchase],
    settlement: SettlePaymentsResponse,
) -> dict[str, Any]:
    return {
        "card_id": str(card.id),
        "opening_balance": opening_balance,
        "purchases": [
            {"quantity": purchase.quantity, "amount": purchase.payment.amount}
            for purchase in purchases
        ],
        "charges": [
            {
                "card_id": str(charge.card_id),
                "amount": charge.amount,
                "balance_after": charge.balance_after,
            }
            for charge in settlement.charges
        ],
        "total": settlement.total,
    }


@app.command()
def checkout(
    balance: int | None = typer.Option(
        None,
        "--balance",
        "-b",
        help="Starting card balance (defaults to DONUT_SHOP_DEFAULT_CARD_BALANCE)",
    ),
    order: list[int] | None = typer.Option(
        None,
        "--order",
        "-o",
        help="Donuts in one purchase; repeat for several purchases",
    ),
    card_id: str | None = typer.Option(
        None,
        "--card-id",
        help="Account id (UUID) of the card; a new one is generated if omitted",
    ),
) -> None:
    """Buy donuts, settle every purchase against the card, print a summary."""
    settings = Settings()
    setup_logging(settings.log_level, settings.service_name, stream=sys.stderr)

    opening_balance = settings.default_card_balance if balance is None else balance
    quantities = order or [1]

    lock_provider = (
        InMemoryLockProvider() if settings.lock_mode == "in_memory" else NoOpLockProvider()
    )
    card_repository = InMemoryCardRepository()

    try:
        account = CardId.generate() if card_id is None else CardId.from_string(card_id)
        card = CreditCard(balance=opening_balance, id=account)
        card_repository.save(card)

        purchases = [buy_donuts(card, quantity) for quantity in quantities]
        settlement = SettlePaymentsUseCase(lock_provider, card_repository).execute(
            request_from_purchases(purchases)
        )
    except DomainException as e:
        logger.error(
            "Checkout failed",
            extra={"error_type": type(e).__name__, "error": str(e)},
        )
        raise typer.Exit(1) from e

    typer.echo(json.dumps(_summary(card, opening_balance, purchases, settlement), indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
