# tests/question_generator/test_pool.py
"""Tests for the fixed-size worker pool."""

import asyncio

import pytest

from mockgen.question_generator import run_pool


class TestRunPool:
    @pytest.mark.asyncio
    async def test_results_in_input_order(self):
        async def job(value: int, delay: float) -> int:
            await asyncio.sleep(delay)
            return value

        delays = [0.03, 0.0, 0.02, 0.01]
        tasks = [lambda v=i, d=d: job(v, d) for i, d in enumerate(delays)]
        assert await run_pool(2, tasks) == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_limit_respected(self):
        in_flight = 0
        peak = 0

        async def job() -> None:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1

        await run_pool(3, [job for _ in range(10)])
        assert peak == 3

    @pytest.mark.asyncio
    async def test_fewer_tasks_than_limit(self):
        async def job() -> str:
            return "ok"

        assert await run_pool(8, [job, job]) == ["ok", "ok"]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await run_pool(4, []) == []

    @pytest.mark.asyncio
    async def test_invalid_limit(self):
        with pytest.raises(ValueError):
            await run_pool(0, [])

    @pytest.mark.asyncio
    async def test_exception_cancels_remaining(self):
        started = []
        cancelled = []

        async def slow(i: int) -> None:
            started.append(i)
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(i)
                raise

        async def boom() -> None:
            await asyncio.sleep(0.01)
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await run_pool(2, [lambda: slow(0), boom, lambda: slow(2)])
        assert cancelled == [0]
        assert 2 not in started

    @pytest.mark.asyncio
    async def test_caller_cancellation_propagates(self):
        cancelled = 0

        async def slow() -> None:
            nonlocal cancelled
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled += 1
                raise

        task = asyncio.create_task(run_pool(3, [slow, slow, slow, slow]))
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert cancelled == 3
