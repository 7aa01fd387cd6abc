from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

DONUT_PRICE = 5


@dataclass(frozen=True)
class Donut:
    """A donut. Carries no state; every Donut equals every other Donut."""

    PRICE: ClassVar[int] = DONUT_PRICE
