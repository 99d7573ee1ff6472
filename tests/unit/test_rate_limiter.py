import asyncio
import time

import pytest
from groww_connect.rate_limiter import REQUEST_DELAY, RequestPacer


def _pacer(clock) -> RequestPacer:
    return RequestPacer(clock=clock, sleep=clock.sleep)


async def test_first_request_is_not_delayed(clock):
    pacer = _pacer(clock)
    await pacer.throttle()
    assert clock.sleeps == []
    assert pacer.last_request == clock.now


async def test_back_to_back_requests_are_spaced(clock):
    pacer = _pacer(clock)
    await pacer.throttle()
    await pacer.throttle()
    assert clock.sleeps == [pytest.approx(REQUEST_DELAY)]


async def test_partial_wait_only_covers_remaining_gap(clock):
    pacer = _pacer(clock)
    await pacer.throttle()
    clock.now += 0.06
    await pacer.throttle()
    assert clock.sleeps == [pytest.approx(0.04)]


async def test_no_wait_when_already_spaced(clock):
    pacer = _pacer(clock)
    await pacer.throttle()
    clock.now += 0.5
    await pacer.throttle()
    assert clock.sleeps == []


async def test_stamp_is_taken_after_wait(clock):
    pacer = _pacer(clock)
    await pacer.throttle()
    start = clock.now
    await pacer.throttle()
    assert pacer.last_request == pytest.approx(start + REQUEST_DELAY)


async def test_real_clock_spacing():
    pacer = RequestPacer()
    stamps = []
    for _ in range(3):
        await pacer.throttle()
        stamps.append(time.monotonic())
    gaps = [b - a for a, b in zip(stamps, stamps[1:])]
    assert all(gap >= REQUEST_DELAY - 0.005 for gap in gaps)


async def test_concurrent_throttles_are_serialized(clock):
    pacer = _pacer(clock)
    stamps = []

    async def send():
        await pacer.throttle()
        stamps.append(clock.now)

    await asyncio.gather(*(send() for _ in range(4)))
    assert clock.sleeps == [pytest.approx(REQUEST_DELAY)] * 3
    assert stamps == [pytest.approx(1000.0 + REQUEST_DELAY * i) for i in range(4)]


async def test_concurrent_throttles_real_clock():
    pacer = RequestPacer()
    stamps = []

    async def send():
        await pacer.throttle()
        stamps.append(time.monotonic())

    await asyncio.gather(*(send() for _ in range(3)))
    stamps.sort()
    gaps = [b - a for a, b in zip(stamps, stamps[1:])]
    assert all(gap >= REQUEST_DELAY - 0.005 for gap in gaps)
