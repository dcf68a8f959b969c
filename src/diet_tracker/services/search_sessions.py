"""Debounced, stale-safe search sessions."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from diet_tracker.domain.foods import MatchResult
from diet_tracker.services.matching import FoodMatcher

DEFAULT_DEBOUNCE_SECONDS = 0.3

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    """Results for the query submitted as ``generation``."""

    generation: int
    query: str
    results: list[MatchResult]


class SearchSession:
    """Runs the matcher for the latest query once input goes quiet.

    Every submitted query bumps the generation counter. Searches that finish
    after a newer query was submitted are dropped instead of delivered, so the
    caller only ever sees results for its most recent query.
    """

    def __init__(
        self,
        matcher: FoodMatcher,
        deliver: Callable[[SearchOutcome], Awaitable[None]],
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self.matcher = matcher
        self.deliver = deliver
        self.debounce_seconds = debounce_seconds
        self._generation = 0
        self._timer: asyncio.TimerHandle | None = None
        self._inflight: set[asyncio.Task[None]] = set()
        self._closed = False

    @property
    def generation(self) -> int:
        """Generation of the most recently submitted query."""
        return self._generation

    def submit(self, query: str) -> int:
        """Schedule a search for ``query`` and return its generation."""
        if self._closed:
            raise RuntimeError("Search session is closed")
        self._generation += 1
        generation = self._generation
        if self._timer is not None:
            self._timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(
            self.debounce_seconds, self._start, generation, query
        )
        return generation

    async def wait_idle(self) -> None:
        """Wait until no search is scheduled or running."""
        while self._timer is not None or self._inflight:
            if self._inflight:
                await asyncio.gather(*self._inflight)
            else:
                await asyncio.sleep(self.debounce_seconds / 2 or 0.001)

    def close(self) -> None:
        """Cancel any scheduled search and suppress further deliveries."""
        self._closed = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _start(self, generation: int, query: str) -> None:
        self._timer = None
        task = asyncio.get_running_loop().create_task(self._run(generation, query))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _run(self, generation: int, query: str) -> None:
        results = await self.matcher.search(query)
        if self._closed or generation != self._generation:
            _logger.debug(
                "Dropping stale search results: query=%s generation=%s current=%s",
                query,
                generation,
                self._generation,
            )
            return
        try:
            await self.deliver(
                SearchOutcome(generation=generation, query=query, results=results)
            )
        except Exception:
            _logger.exception(
                "Search delivery failed: query=%s generation=%s", query, generation
            )
