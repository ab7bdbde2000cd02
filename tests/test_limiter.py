# File: tests/test_limiter.py
import asyncio

import pytest

from page_scout.crawler.limiter import ConcurrencyLimiter


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ConcurrencyLimiter(0)


@pytest.mark.asyncio()
async def test_never_exceeds_capacity():
    limiter = ConcurrencyLimiter(3)
    running = {"now": 0, "max": 0}

    async def job(delay: float) -> float:
        running["now"] += 1
        running["max"] = max(running["max"], running["now"])
        await asyncio.sleep(delay)
        running["now"] -= 1
        return delay

    results = await asyncio.gather(*(limiter.run(job, 0.01 * (i % 4)) for i in range(20)))
    assert len(results) == 20
    assert running["max"] <= 3
    assert limiter.peak == 3
    assert limiter.active == 0


@pytest.mark.asyncio()
async def test_queued_tasks_start_in_submission_order():
    limiter = ConcurrencyLimiter(1)
    started: list[int] = []

    async def job(i: int) -> None:
        started.append(i)
        await asyncio.sleep(0)

    await asyncio.gather(*(limiter.run(job, i) for i in range(10)))
    assert started == list(range(10))


@pytest.mark.asyncio()
async def test_slot_released_on_error():
    limiter = ConcurrencyLimiter(1)

    async def boom() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await limiter.run(boom)

    async def ok() -> str:
        return "ok"

    assert await asyncio.wait_for(limiter.run(ok), timeout=1) == "ok"
    assert limiter.active == 0
