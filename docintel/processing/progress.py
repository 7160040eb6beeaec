"""Per-document progress channel.

Events are published to two kinds of consumers: synchronous callbacks
registered with ``on_progress`` and async subscriptions that iterate until
the run's terminal ``complete``/``error`` event.
"""

import asyncio
import time
from collections import defaultdict
from collections.abc import Callable
from types import TracebackType

from docintel.logging.logger import Log
from docintel.processing.models import ProgressEvent

ProgressListener = Callable[[ProgressEvent], None]


class ProgressSubscription:
    """Async iterator over one document's events; ends after a terminal event.

    Use it as an async context manager so it is always detached:

        async with broker.subscribe(doc_id) as events:
            async for event in events:
                ...
    """

    def __init__(self, broker: "ProgressBroker", document_id: str) -> None:
        self._broker = broker
        self.document_id = document_id
        self._queue: asyncio.Queue[ProgressEvent | None] = asyncio.Queue()
        self._finished = False

    def _deliver(self, event: ProgressEvent | None) -> None:
        self._queue.put_nowait(event)

    def __aiter__(self) -> "ProgressSubscription":
        return self

    async def __anext__(self) -> ProgressEvent:
        if self._finished:
            raise StopAsyncIteration
        event = await self._queue.get()
        if event is None:
            self._finish()
            raise StopAsyncIteration
        if event.is_terminal:
            self._finish()
        return event

    def _finish(self) -> None:
        self._finished = True
        self._broker._detach(self)

    def close(self) -> None:
        if not self._finished:
            self._finish()

    async def __aenter__(self) -> "ProgressSubscription":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class ProgressBroker:
    """Fan-out of progress events keyed by document id."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._listeners: dict[str, list[ProgressListener]] = defaultdict(list)
        self._subscriptions: dict[str, list[ProgressSubscription]] = defaultdict(list)
        self._history: dict[str, list[ProgressEvent]] = defaultdict(list)

    def on_progress(self, document_id: str, listener: ProgressListener) -> None:
        self._listeners[document_id].append(listener)

    def off_progress(self, document_id: str, listener: ProgressListener) -> None:
        listeners = self._listeners.get(document_id)
        if not listeners:
            return
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            del self._listeners[document_id]

    def subscribe(self, document_id: str, *, replay: bool = True) -> ProgressSubscription:
        """Open a subscription; with ``replay`` it first yields the current run's events."""
        subscription = ProgressSubscription(self, document_id)
        if replay:
            for event in self._history.get(document_id, []):
                subscription._deliver(event)
        self._subscriptions[document_id].append(subscription)
        return subscription

    def _detach(self, subscription: ProgressSubscription) -> None:
        subscriptions = self._subscriptions.get(subscription.document_id)
        if subscriptions and subscription in subscriptions:
            subscriptions.remove(subscription)
            if not subscriptions:
                del self._subscriptions[subscription.document_id]

    def begin(self, document_id: str) -> None:
        """Start a new run for ``document_id``; earlier events are forgotten."""
        self._history.pop(document_id, None)

    def publish(
        self,
        document_id: str,
        stage: str,
        progress: int,
        message: str,
        *,
        overall_progress: int = 0,
    ) -> ProgressEvent:
        event = self.record(document_id, stage, progress, message, overall_progress=overall_progress)
        self.dispatch(event)
        return event

    def record(
        self,
        document_id: str,
        stage: str,
        progress: int,
        message: str,
        *,
        overall_progress: int = 0,
    ) -> ProgressEvent:
        """Append an event to the run's history without notifying anyone yet."""
        history = self._history[document_id]
        timestamp = self._clock()
        if history and timestamp < history[-1].timestamp:
            timestamp = history[-1].timestamp
        event = ProgressEvent(
            document_id=document_id,
            stage=stage,
            progress=progress,
            message=message,
            timestamp=timestamp,
            overall_progress=overall_progress,
        )
        history.append(event)
        Log.debug("Progress", document_id=document_id, stage=stage, progress=progress)
        return event

    def latest(self, document_id: str) -> ProgressEvent | None:
        history = self._history.get(document_id)
        return history[-1] if history else None

    def dispatch(self, event: ProgressEvent) -> None:
        document_id = event.document_id
        for listener in list(self._listeners.get(document_id, [])):
            try:
                listener(event)
            except Exception as exc:
                Log.error("Progress listener failed", document_id=document_id, error=repr(exc))
        for subscription in list(self._subscriptions.get(document_id, [])):
            subscription._deliver(event)

    def listener_count(self, document_id: str) -> int:
        return len(self._listeners.get(document_id, [])) + len(self._subscriptions.get(document_id, []))

    def cleanup(self, document_id: str) -> None:
        """Drop every listener, subscription and event for ``document_id``."""
        self._listeners.pop(document_id, None)
        self._history.pop(document_id, None)
        for subscription in self._subscriptions.pop(document_id, []):
            subscription._deliver(None)
