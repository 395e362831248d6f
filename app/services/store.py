from __future__ import annotations

import asyncio
import logging
from typing import Callable

from app.schemas import Character
from app.services.connectors.base import RecordFetcher
from app.services.fetch_state import Failed, FetchState, Idle, Loading, Succeeded
from app.services.validation import ValidationError, parse_record_id

logger = logging.getLogger(__name__)

Subscriber = Callable[[FetchState], None]

_LOADABLE = (Idle, Succeeded, Failed)
_CANCELLED = Failed(kind="cancelled", error="CancelledError: fetch task was cancelled")


class CharacterStore:
    """Single-owner holder of the latest FetchState.

    The load task is the only writer. Every transition is pushed to the
    subscribers synchronously, in subscription order. A failed fetch replaces
    the previous records; nothing from an earlier Succeeded state survives it.
    """

    def __init__(self, fetcher: RecordFetcher) -> None:
        self._fetcher = fetcher
        self._state: FetchState = Idle()
        self._subscribers: list[Subscriber] = []
        self._inflight: asyncio.Task[FetchState] | None = None
        self._closed = False

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, state: FetchState) -> None:
        previous = self._state
        self._state = state
        logger.info("Store state %s -> %s", previous.status.value, state.status.value)
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception("Store subscriber %r raised on %s", callback, state.status.value)

    def load(self) -> asyncio.Task[FetchState]:
        """Start one fetch and return its task.

        Must be called from a running event loop. While a fetch is in flight
        the existing task is returned and no second request is made.
        """
        if self._closed:
            raise RuntimeError("Cannot load a closed store")
        if not isinstance(self._state, _LOADABLE) and self._inflight is not None:
            logger.info("Load requested while loading; joining in-flight fetch")
            return self._inflight
        loop = asyncio.get_running_loop()
        self._publish(Loading())
        self._inflight = loop.create_task(self._run_fetch())
        self._inflight.add_done_callback(self._settle_unstarted)
        return self._inflight

    def _settle_unstarted(self, task: asyncio.Task[FetchState]) -> None:
        # A task cancelled before its first step never enters _run_fetch.
        if self._inflight is not task:
            return
        self._inflight = None
        if not self._closed:
            self._publish(_CANCELLED)

    async def _run_fetch(self) -> FetchState:
        result: FetchState = _CANCELLED
        try:
            result = await self._fetcher.fetch()
        except Exception as exc:
            logger.exception("Fetcher %s raised instead of returning a state", self._fetcher.name)
            result = Failed(kind="unexpected", error=f"{type(exc).__name__}: {exc}")
        finally:
            self._inflight = None
            if self._closed:
                logger.debug("Store closed before fetch settled; dropping %s", result.status.value)
            else:
                self._publish(result)
        return result

    async def refresh(self) -> FetchState:
        return await asyncio.shield(self.load())

    async def wait_until_settled(self) -> FetchState:
        if self._inflight is not None:
            await asyncio.shield(self._inflight)
        return self._state

    def find_by_id(self, record_id: int | str) -> Character | None:
        state = self._state
        if not isinstance(state, Succeeded):
            return None
        try:
            parsed = parse_record_id(record_id)
        except ValidationError:
            return None
        return state.find(parsed)

    def close(self) -> None:
        self._closed = True
        self._subscribers.clear()
