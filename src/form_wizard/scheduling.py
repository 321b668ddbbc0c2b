"""Pluggable scheduler interface used by the review screen's effects.

A scheduler provides the delay imposed before a submission result is
delivered, and marshals that delivery back onto the loop that owns the store.
The asyncio scheduler is the default; the manual scheduler runs on a virtual
clock so tests can step through time deterministically.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class Scheduler(ABC):
    """Abstract interface for delaying and delivering effect results."""

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        """Suspend the calling effect for ``seconds``."""

    @abstractmethod
    async def run_on_main(self, callback: Callable[..., Any], *args: Any) -> None:
        """Run ``callback(*args)`` on the main context and wait for it to finish."""


async def _invoke(callback: Callable[..., Any], args: tuple) -> None:
    callback(*args)


class AsyncioScheduler(Scheduler):
    """Real-time scheduler bound to an asyncio event loop.

    If no loop is given, the loop running at delivery time is treated as the
    main context.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    async def run_on_main(self, callback: Callable[..., Any], *args: Any) -> None:
        current = asyncio.get_running_loop()
        main = self._loop or current
        if main is current:
            callback(*args)
            return
        future = asyncio.run_coroutine_threadsafe(_invoke(callback, args), main)
        await asyncio.wrap_future(future)


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler. Sleepers wake only when ``advance`` moves the clock."""

    def __init__(self) -> None:
        self.now: float = 0.0
        self._sleepers: list[tuple[float, asyncio.Future]] = []

    @property
    def pending(self) -> int:
        """Number of sleepers still waiting for the clock."""
        return sum(1 for _, fut in self._sleepers if not fut.done())

    async def sleep(self, seconds: float) -> None:
        if seconds <= 0:
            return
        future = asyncio.get_running_loop().create_future()
        self._sleepers.append((self.now + seconds, future))
        await future

    async def run_on_main(self, callback: Callable[..., Any], *args: Any) -> None:
        callback(*args)

    async def advance(self, seconds: float = 0.0) -> None:
        """Move the clock forward and wake every sleeper that is due."""
        await self._settle()
        self.now += seconds
        due = [entry for entry in self._sleepers if entry[0] <= self.now]
        self._sleepers = [entry for entry in self._sleepers if entry[0] > self.now]
        for _, future in sorted(due, key=lambda entry: entry[0]):
            if not future.done():
                future.set_result(None)
        await self._settle()

    @staticmethod
    async def _settle(rounds: int = 10) -> None:
        # Let woken tasks run up to their next suspension point
        for _ in range(rounds):
            await asyncio.sleep(0)
