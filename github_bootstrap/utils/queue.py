"""A small asynchronous work queue with bounded concurrency."""

import asyncio
from typing import Any, Awaitable, Callable, Self

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class WorkQueue:
    """Runs deferred coroutine functions with at most ``concurrency`` in flight.

    Tasks start in the order they were deferred. ``await_all`` returns the
    results in that same order, or raises the first error encountered. Once a
    task has failed no further tasks are started; with a concurrency of 1 this
    means nothing after the failing task runs at all.

    Example:
        queue = WorkQueue(concurrency=1)
        queue.defer(adapter.delete_label, "bug")
        queue.defer(adapter.delete_label, "feature")
        await queue.await_all()
    """

    def __init__(self, concurrency: int = 1) -> None:
        """Initialize an empty queue."""
        if concurrency < 1:
            raise ValueError(f"Queue concurrency must be at least 1, got {concurrency}")
        self.concurrency = concurrency
        self._tasks: list[tuple[Callable[..., Awaitable[Any]], tuple[Any, ...], dict[str, Any]]] = []
        self._started = False

    def __len__(self) -> int:
        """Return the number of deferred tasks."""
        return len(self._tasks)

    def defer(self, func: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> Self:
        """Schedule ``func(*args, **kwargs)`` to run when the queue is awaited."""
        if self._started:
            raise RuntimeError("Cannot defer tasks after await_all() has been called")
        self._tasks.append((func, args, kwargs))
        return self

    async def await_all(self) -> list[Any]:
        """Run every deferred task and return their results in defer order."""
        if self._started:
            raise RuntimeError("await_all() can only be called once per queue")
        self._started = True

        results: list[Any] = [None] * len(self._tasks)
        pending = iter(enumerate(self._tasks))
        failed = asyncio.Event()

        async def worker() -> None:
            # Workers share one iterator, so each task is taken exactly once.
            for index, (func, args, kwargs) in pending:
                if failed.is_set():
                    return
                try:
                    results[index] = await func(*args, **kwargs)
                except Exception:
                    failed.set()
                    raise

        workers = [asyncio.create_task(worker()) for _ in range(min(self.concurrency, len(self._tasks)))]
        try:
            await asyncio.gather(*workers)
        except Exception:
            # Let tasks already in flight finish; only the first error is reported.
            await asyncio.gather(*workers, return_exceptions=True)
            raise
        return results
