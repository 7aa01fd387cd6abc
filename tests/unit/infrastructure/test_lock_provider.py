"""Tests for LockProvider implementations.

Tests cover:
- InMemoryLockProvider per-card serialization
- Lock release on exception
- NoOpLockProvider for single-threaded tests
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait

import pytest

from donut_shop.application.ports import LockProvider
from donut_shop.domain.value_objects import CardId
from donut_shop.infrastructure.lock_provider import (
    InMemoryLockProvider,
    NoOpLockProvider,
)

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def resource_id() -> str:
    return str(CardId.generate().value)


# =============================================================================
# InMemoryLockProvider Tests
# =============================================================================


class TestInMemoryLockProviderInterface:
    def test_implements_lock_provider_interface(self, lock_provider: InMemoryLockProvider) -> None:
        assert isinstance(lock_provider, LockProvider)

    def test_same_resource_can_be_acquired_sequentially(
        self, lock_provider: InMemoryLockProvider, resource_id: str
    ) -> None:
        acquisitions = 0

        with lock_provider.acquire(resource_id):
            acquisitions += 1

        with lock_provider.acquire(resource_id):
            acquisitions += 1

        assert acquisitions == 2

    def test_different_resources_use_different_locks(
        self, lock_provider: InMemoryLockProvider
    ) -> None:
        with lock_provider.acquire("card-a"), lock_provider.acquire("card-b"):
            pass


class TestInMemoryLockProviderExceptionSafety:
    def test_lock_released_on_exception(
        self, lock_provider: InMemoryLockProvider, resource_id: str
    ) -> None:
        with pytest.raises(RuntimeError), lock_provider.acquire(resource_id):
            raise RuntimeError("Simulated failure")

        acquired = False
        with lock_provider.acquire(resource_id):
            acquired = True

        assert acquired is True


class TestInMemoryLockProviderConcurrency:
    def test_same_resource_serializes_access(
        self, lock_provider: InMemoryLockProvider, resource_id: str
    ) -> None:
        inside = 0
        max_inside = 0
        count_lock = threading.Lock()

        def worker() -> None:
            nonlocal inside, max_inside
            with lock_provider.acquire(resource_id):
                with count_lock:
                    inside += 1
                    max_inside = max(max_inside, inside)
                time.sleep(0.02)
                with count_lock:
                    inside -= 1

        with ThreadPoolExecutor(max_workers=4) as executor:
            futures = [executor.submit(worker) for _ in range(4)]
            wait(futures)

        assert max_inside == 1

    def test_different_resources_allow_parallel_access(
        self, lock_provider: InMemoryLockProvider
    ) -> None:
        parallel_count = 0
        max_parallel = 0
        count_lock = threading.Lock()
        barrier = threading.Barrier(3, timeout=5)

        def worker(resource: str) -> None:
            nonlocal parallel_count, max_parallel
            with lock_provider.acquire(resource):
                with count_lock:
                    parallel_count += 1
                    max_parallel = max(max_parallel, parallel_count)
                barrier.wait()
                with count_lock:
                    parallel_count -= 1

        with ThreadPoolExecutor(max_workers=3) as executor:
            futures = [executor.submit(worker, f"card-{i}") for i in range(3)]
            wait(futures)

        for future in futures:
            future.result()
        assert max_parallel == 3

    def test_same_lock_reused_for_same_resource(
        self, lock_provider: InMemoryLockProvider, resource_id: str
    ) -> None:
        with lock_provider.acquire(resource_id):
            first_lock = lock_provider._locks[resource_id]

        with lock_provider.acquire(resource_id):
            second_lock = lock_provider._locks[resource_id]

        assert first_lock is second_lock


# =============================================================================
# NoOpLockProvider Tests
# =============================================================================


class TestNoOpLockProvider:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(NoOpLockProvider(), LockProvider)

    def test_same_resource_can_be_acquired_reentrantly(self) -> None:
        provider = NoOpLockProvider()
        acquisitions = 0

        with provider.acquire("card"):
            acquisitions += 1
            with provider.acquire("card"):
                acquisitions += 1

        assert acquisitions == 2

    def test_exception_propagates(self) -> None:
        provider = NoOpLockProvider()

        with pytest.raises(RuntimeError, match="test error"), provider.acquire("card"):
            raise RuntimeError("test error")
