"""Async debounce helper used by the editor integration."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

LOG = logging.getLogger(__name__)

ResultCallback = Callable[[Any], None]


class Debouncer:
    """Coalesces rapid-fire calls into a single coroutine run.

    Each submission supersedes the previous one. A pending run is cancelled,
    and a run that still manages to finish after a newer submission has its
    result dropped instead of handed to ``on_result``.
    """

    def __init__(self, delay: float = 0.15) -> None:
        self._delay = delay
        self._task: asyncio.Task[Any] | None = None
        self._generation = 0

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def generation(self) -> int:
        return self._generation

    def submit(
        self,
        coro_factory: Callable[[], Awaitable[Any]],
        on_result: ResultCallback | None = None,
    ) -> None:
        """Schedule a coroutine, cancelling any pending invocation."""

        self._generation += 1
        if self._task:
            self._task.cancel()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._runner(self._generation, coro_factory, on_result))

    def cancel(self) -> None:
        """Cancel any pending invocation."""

        self._generation += 1
        if self._task:
            self._task.cancel()
            self._task = None

    async def wait(self) -> None:
        """Wait for the most recent submission to settle."""

        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            return

    async def _runner(
        self,
        generation: int,
        coro_factory: Callable[[], Awaitable[Any]],
        on_result: ResultCallback | None,
    ) -> None:
        try:
            await asyncio.sleep(self._delay)
            result = await coro_factory()
        except asyncio.CancelledError:
            return
        if generation != self._generation:
            LOG.debug("Dropping stale debounced result", extra={"generation": generation})
            return
        if on_result is not None:
            on_result(result)


__all__ = ["Debouncer"]
