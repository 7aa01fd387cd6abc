from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from donut_shop.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


class InMemoryLockProvider(LockProvider):
    """In-process lock provider with one lock per card.

    InMemoryCardRepository hands out copies, so settling a card is a
    read-modify-write (get, charge, save). Two settlements on one card
    without this lock can both read the same balance and one charge is lost.

    The global lock only guards the lock table; it is released before the
    card lock is taken, so different cards settle in parallel.

    Limitations:
    - Single-process only
    - Locks are never evicted
    """

    def __init__(self) -> None:
        self._locks: dict[str, Lock] = {}
        self._global_lock = Lock()

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        with self._global_lock:
            lock = self._locks.setdefault(resource_id, Lock())

        with lock:
            yield


class NoOpLockProvider(LockProvider):
    """Lock provider that performs no locking.

    Only for single-threaded use, e.g. unit tests or the CLI.
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
