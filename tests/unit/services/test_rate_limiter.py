"""
Tests du limiteur de debit partage.
"""

import asyncio

import pytest

from ottcatalog.services.rate_limiter import RateLimiter
from tests.fixtures.factories import ManualClock


class FakeSleep:
    """Enregistre les attentes et fait avancer l'horloge."""

    def __init__(self, clock: ManualClock) -> None:
        self.clock = clock
        self.waits: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)
        self.clock.advance(seconds)


@pytest.fixture
def sleep(clock: ManualClock) -> FakeSleep:
    return FakeSleep(clock)


class TestRateLimiter:
    """Tests de RateLimiter."""

    @pytest.mark.asyncio
    async def test_first_acquire_does_not_wait(self, clock: ManualClock, sleep: FakeSleep) -> None:
        limiter = RateLimiter(min_interval=0.25, clock=clock, sleep=sleep)

        await limiter.acquire()

        assert sleep.waits == []

    @pytest.mark.asyncio
    async def test_waits_remaining_interval(self, clock: ManualClock, sleep: FakeSleep) -> None:
        limiter = RateLimiter(min_interval=0.25, clock=clock, sleep=sleep)

        await limiter.acquire()
        clock.advance(0.1)
        await limiter.acquire()

        assert sleep.waits == [pytest.approx(0.15)]

    @pytest.mark.asyncio
    async def test_no_wait_when_interval_elapsed(self, clock: ManualClock, sleep: FakeSleep) -> None:
        limiter = RateLimiter(min_interval=0.25, clock=clock, sleep=sleep)

        await limiter.acquire()
        clock.advance(1)
        await limiter.acquire()

        assert sleep.waits == []

    @pytest.mark.asyncio
    async def test_concurrent_callers_are_spaced(self, clock: ManualClock, sleep: FakeSleep) -> None:
        """Des appelants concurrents sont espaces d'au moins l'intervalle minimal."""
        limiter = RateLimiter(min_interval=0.25, clock=clock, sleep=sleep)
        stamps: list[float] = []

        async def call() -> None:
            async with limiter:
                stamps.append(clock())

        await asyncio.gather(*(call() for _ in range(4)))

        gaps = [b - a for a, b in zip(stamps, stamps[1:])]
        assert all(gap >= 0.25 - 1e-9 for gap in gaps)

    @pytest.mark.asyncio
    async def test_zero_interval_never_waits(self, clock: ManualClock, sleep: FakeSleep) -> None:
        limiter = RateLimiter(min_interval=0, clock=clock, sleep=sleep)

        for _ in range(3):
            await limiter.acquire()

        assert sleep.waits == []
