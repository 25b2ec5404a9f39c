"""Debounced location search with stale-response fencing.

Keystrokes reschedule a single debounce timer; when it fires, the current
query is sent to the suggestion resolver as a background task stamped with a
new sequence number. Replies are applied only while their stamp is still the
latest dispatched one, so a slow early reply can never overwrite a newer list.
In-flight requests are not cancelled, only fenced.
"""

import asyncio
import logging
from collections.abc import Callable

from weathernow.ingest.suggestion_resolver import SuggestionResolver
from weathernow.models.location import Suggestion
from weathernow.search.debounce import DebounceTimer, Scheduler

logger = logging.getLogger(__name__)

DEFAULT_QUIET_PERIOD = 0.3  # seconds

SuggestionListener = Callable[[tuple[Suggestion, ...]], None]


class QueryController:
    def __init__(
        self,
        resolver: SuggestionResolver,
        on_suggestions: SuggestionListener | None = None,
        quiet_period: float = DEFAULT_QUIET_PERIOD,
        scheduler: Scheduler | None = None,
    ):
        self.resolver = resolver
        self.on_suggestions = on_suggestions
        self._timer = DebounceTimer(quiet_period, scheduler)
        self._query = ""
        self._suggestions: tuple[Suggestion, ...] = ()
        self._sequence = 0
        self._in_flight: set[asyncio.Task] = set()

    @property
    def query(self) -> str:
        return self._query

    @property
    def suggestions(self) -> tuple[Suggestion, ...]:
        return self._suggestions

    @property
    def sequence(self) -> int:
        """Number of the latest dispatched (or invalidated) request."""
        return self._sequence

    @property
    def pending(self) -> bool:
        return self._timer.pending

    def on_input(self, text: str) -> None:
        self._timer.cancel()
        self._query = text
        if not text.strip():
            self._invalidate()
            self._publish(())
            return
        self._timer.schedule(self._dispatch)

    def select(self, suggestion: Suggestion) -> Suggestion:
        """Choose a suggestion: empties the list and the query field."""
        self.clear()
        return suggestion

    def clear(self) -> None:
        self._timer.cancel()
        self._query = ""
        self._invalidate()
        self._publish(())

    def close(self) -> None:
        self._timer.cancel()

    async def flush(self) -> tuple[Suggestion, ...]:
        """Fire a pending debounce immediately and wait for its reply."""
        if self._timer.pending:
            self._timer.cancel()
            self._dispatch()
        await self.wait_idle()
        return self._suggestions

    async def lookup(self, text: str) -> tuple[Suggestion, ...]:
        """Resolve text now, bypassing the debounce.

        Returns this call's own results even when newer input overtakes it;
        they are published only while still the latest request.
        """
        self._timer.cancel()
        self._query = text
        if not text.strip():
            self._invalidate()
            self._publish(())
            return ()
        self._sequence += 1
        seq = self._sequence
        results = tuple(await self.resolver.resolve(text))
        if seq == self._sequence:
            self._publish(results)
        return results

    async def wait_idle(self) -> None:
        """Wait for every in-flight resolution to settle."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    def _invalidate(self) -> None:
        # Replies to anything dispatched before now become stale.
        self._sequence += 1

    def _dispatch(self) -> None:
        self._sequence += 1
        seq = self._sequence
        query = self._query
        logger.debug("Dispatching suggestion request #%d for %r", seq, query)
        task = asyncio.get_running_loop().create_task(self._resolve(query, seq))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _resolve(self, query: str, seq: int) -> None:
        results = await self.resolver.resolve(query)
        if seq != self._sequence:
            logger.debug(
                "Discarding stale suggestions #%d for %r (latest #%d)",
                seq, query, self._sequence,
            )
            return
        self._publish(tuple(results))

    def _publish(self, suggestions: tuple[Suggestion, ...]) -> None:
        self._suggestions = suggestions
        if self.on_suggestions is not None:
            self.on_suggestions(suggestions)
