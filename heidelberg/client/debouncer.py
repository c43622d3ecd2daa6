"""Trailing-edge debounce on the asyncio event loop."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class Debouncer(Generic[T]):
    """
    Forward only the last value pushed within a quiet period.

    Every ``push`` restarts the timer and discards the value still waiting,
    so a continuous slider drag produces one forward once the input has
    been quiet for ``delay`` seconds.
    """

    def __init__(self, delay: float, callback: Callable[[T], Awaitable[None] | None]) -> None:
        if delay < 0:
            raise ValueError("Debounce delay cannot be negative")
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        """Schedule ``value``, superseding whatever is still waiting."""
        loop = asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(self.delay, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def drain(self) -> None:
        """Wait for forwards that already fired to finish."""
        if self._tasks:
            await asyncio.gather(*self._tasks)

    def _fire(self, value: T) -> None:
        self._handle = None
        logger.debug("debounce_fired", value=value)
        result = self._callback(value)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
