# src/mockgen/question_generator/pool.py
"""Fixed-size worker pool for upstream batch calls."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


async def run_pool(limit: int, tasks: Sequence[Callable[[], Awaitable[T]]]) -> list[T]:
    """Run task factories with at most `limit` in flight at once.

    min(limit, len(tasks)) workers pull from a shared queue; a task is only
    started when a worker is free. Results are returned in input order.

    If a task raises, or the caller is cancelled, the remaining workers are
    cancelled and the exception propagates.

    Args:
        limit: Maximum number of concurrently running tasks (>= 1).
        tasks: Zero-argument callables returning awaitables.

    Returns:
        One result per task, in the same order as `tasks`.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    if not tasks:
        return []

    results: list[T | None] = [None] * len(tasks)
    queue = iter(enumerate(tasks))

    async def worker() -> None:
        for index, factory in queue:
            results[index] = await factory()

    workers = [asyncio.create_task(worker()) for _ in range(min(limit, len(tasks)))]
    try:
        await asyncio.gather(*workers)
    except BaseException:
        for w in workers:
            w.cancel()
        await asyncio.gather(*workers, return_exceptions=True)
        raise
    return results  # type: ignore[return-value]
