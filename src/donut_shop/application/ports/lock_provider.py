from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port for per-card locking.

    CreditCard balances are mutable and not thread-safe, so every
    load/charge/save on one card runs while holding that card's lock.

    Contract:
    - acquire() MUST serialize access to the same resource_id
    - acquire() MUST release the lock when the context exits (normal or exception)
    - acquire() MUST block until the lock is available
    - Different resource_ids MAY be acquired concurrently
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Acquire a lock for the given resource ID.

        Args:
            resource_id: Canonical string identifier, e.g. str(card_id.value).

        Yields:
            None. The lock is held for the duration of the context.
        """
        ...
