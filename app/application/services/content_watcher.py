"""Live binding: per-document change feed, subscriptions, and bound views.

The store's REST API has no push channel, so ContentChangeFeed polls each
watched document's update time and fans changes out to subscribers. One
poller runs per watched document; it starts with the first subscription
and stops when the last one is cancelled. Writes made in this process
wake the poller immediately through notify().
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from app.application.dtos.content import ContentSnapshot
from app.application.interfaces.repositories import IContentRepository
from app.domain.enums import BindingState, ContentId
from app.schemas.content import DOCUMENT_MODELS, ContentDocument
from app.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from app.application.services.content_service import ContentService

logger = get_logger(__name__)

_QUEUE_SIZE = 16


@dataclass(frozen=True)
class ContentChange:
    """One event delivered to a subscription: a fresh snapshot or a poll error."""

    content_id: ContentId
    snapshot: ContentSnapshot | None = None
    error: str | None = None


class ContentSubscription:
    """Cancellable handle yielding ContentChange events for one document.

    Use ``async for change in subscription`` and call cancel() (idempotent)
    on teardown, or use it as an async context manager.
    """

    _CLOSED = object()

    def __init__(self, feed: "ContentChangeFeed", content_id: ContentId) -> None:
        self.content_id = content_id
        self._feed = feed
        self._queue: asyncio.Queue[Any] = asyncio.Queue(maxsize=_QUEUE_SIZE)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _push(self, change: Any) -> None:
        """Enqueue without blocking the poller; a slow consumer loses the oldest event."""
        if self._queue.full():
            with contextlib.suppress(asyncio.QueueEmpty):
                self._queue.get_nowait()
        self._queue.put_nowait(change)

    async def cancel(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._feed._unsubscribe(self)
        self._push(self._CLOSED)

    def __aiter__(self) -> "ContentSubscription":
        return self

    async def __anext__(self) -> ContentChange:
        if self._closed and self._queue.empty():
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is self._CLOSED:
            raise StopAsyncIteration
        return item

    async def __aenter__(self) -> "ContentSubscription":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.cancel()


class ContentChangeFeed:
    """Polls watched documents and fans out changes to subscriptions.

    Runs pollers as background tasks within the FastAPI lifespan; call
    stop() at shutdown.
    """

    def __init__(
        self,
        content_repo: IContentRepository,
        poll_interval_seconds: float = 2.0,
    ) -> None:
        self._repo = content_repo
        self._interval = poll_interval_seconds
        self._subscribers: dict[ContentId, set[ContentSubscription]] = {}
        self._tasks: dict[ContentId, asyncio.Task] = {}
        self._wakeups: dict[ContentId, asyncio.Event] = {}
        self._last_seen: dict[ContentId, datetime | None] = {}
        self._failing: set[ContentId] = set()

    def subscriber_count(self, content_id: ContentId) -> int:
        return len(self._subscribers.get(content_id, ()))

    def is_polling(self, content_id: ContentId) -> bool:
        return content_id in self._tasks

    async def subscribe(self, content_id: ContentId) -> ContentSubscription:
        """Register a subscriber; starts the document's poller if needed."""
        subscription = ContentSubscription(self, content_id)
        self._subscribers.setdefault(content_id, set()).add(subscription)
        if content_id not in self._tasks:
            self._wakeups[content_id] = asyncio.Event()
            self._tasks[content_id] = asyncio.create_task(self._poll_loop(content_id))
            logger.info("Change feed watching %s", content_id.value)
        return subscription

    async def _unsubscribe(self, subscription: ContentSubscription) -> None:
        content_id = subscription.content_id
        subscribers = self._subscribers.get(content_id)
        if subscribers is None:
            return
        subscribers.discard(subscription)
        if not subscribers:
            await self._stop_poller(content_id)

    async def _stop_poller(self, content_id: ContentId) -> None:
        self._subscribers.pop(content_id, None)
        self._wakeups.pop(content_id, None)
        self._last_seen.pop(content_id, None)
        self._failing.discard(content_id)
        task = self._tasks.pop(content_id, None)
        if task is not None and task is not asyncio.current_task():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
            logger.info("Change feed stopped watching %s", content_id.value)

    async def notify(self, content_id: ContentId) -> None:
        """Wake the document's poller now (same-process write)."""
        event = self._wakeups.get(content_id)
        if event is not None:
            event.set()

    def _publish(self, change: ContentChange) -> None:
        for subscription in list(self._subscribers.get(change.content_id, ())):
            subscription._push(change)

    async def poll_once(self, content_id: ContentId) -> bool:
        """Fetch the document and publish if its update time moved.

        The first successful poll only records a baseline. The first success
        after a failure streak always publishes, so bindings leave the error
        state. Returns True when a change was published.
        """
        snapshot = await self._repo.get(content_id)
        recovered = content_id in self._failing
        self._failing.discard(content_id)
        if snapshot is None:
            return False
        baseline_known = content_id in self._last_seen
        previous = self._last_seen.get(content_id)
        self._last_seen[content_id] = snapshot.update_time
        nothing_new = not baseline_known or snapshot.update_time == previous
        if nothing_new and not recovered:
            return False
        logger.debug("Change detected on %s at %s", content_id.value, snapshot.update_time)
        self._publish(ContentChange(content_id=content_id, snapshot=snapshot))
        return True

    async def _poll_loop(self, content_id: ContentId) -> None:
        """Poll until cancelled. Errors are logged and reported once per failure streak."""
        while True:
            try:
                await self.poll_once(content_id)
            except Exception as e:
                logger.exception("Error polling %s", content_id.value)
                if content_id not in self._failing:
                    self._failing.add(content_id)
                    self._publish(
                        ContentChange(content_id=content_id, error=str(e) or type(e).__name__)
                    )
            event = self._wakeups.get(content_id)
            if event is None:
                return
            with contextlib.suppress(asyncio.TimeoutError):
                await asyncio.wait_for(event.wait(), timeout=self._interval)
            event.clear()

    async def stop(self) -> None:
        """Cancel every poller and close every subscription."""
        for content_id in list(self._tasks):
            subscriptions = list(self._subscribers.get(content_id, ()))
            await self._stop_poller(content_id)
            for subscription in subscriptions:
                subscription._closed = True
                subscription._push(ContentSubscription._CLOSED)
        logger.info("Change feed stopped")


BindingListener = Callable[[dict[str, Any]], Awaitable[None]]


class LiveContentBinding:
    """Bound view of one document: idle -> loading -> ready | error.

    start() performs the initial accessor read and opens the subscription;
    run() applies pushed changes until close(). Each pushed snapshot
    clears the content cache and re-enters ready with the fresh data.
    """

    def __init__(
        self,
        content_id: ContentId,
        content_service: "ContentService",
        feed: ContentChangeFeed,
        listener: BindingListener | None = None,
    ) -> None:
        self.content_id = content_id
        self.state = BindingState.IDLE
        self.data: ContentDocument | None = None
        self.error: str | None = None
        self._service = content_service
        self._feed = feed
        self._listener = listener
        self._subscription: ContentSubscription | None = None

    def to_message(self) -> dict[str, Any]:
        return {
            "state": self.state.value,
            "content_id": self.content_id.value,
            "data": self.data.model_dump(mode="json", by_alias=True) if self.data else None,
            "error": self.error,
        }

    async def _transition(self, state: BindingState) -> None:
        self.state = state
        if self._listener is not None:
            await self._listener(self.to_message())

    async def start(self) -> None:
        if self.state != BindingState.IDLE:
            return
        await self._transition(BindingState.LOADING)
        self._subscription = await self._feed.subscribe(self.content_id)
        document = await self._service.get_document(self.content_id)
        if document is None:
            self.error = "Content unavailable"
            await self._transition(BindingState.ERROR)
        else:
            self.data = document
            self.error = None
            await self._transition(BindingState.READY)

    async def apply(self, change: ContentChange) -> None:
        """Apply one pushed change."""
        if change.error is not None:
            self.error = change.error
            await self._transition(BindingState.ERROR)
            return
        if change.snapshot is None:
            return
        await self._service.clear_cache()
        try:
            self.data = DOCUMENT_MODELS[self.content_id].model_validate(
                {**change.snapshot.data, "id": self.content_id.value}
            )
        except PydanticValidationError:
            logger.exception("Pushed %s snapshot is not readable", self.content_id.value)
            self.error = "Content unreadable"
            await self._transition(BindingState.ERROR)
            return
        self.error = None
        await self._transition(BindingState.READY)

    async def run(self) -> None:
        """Consume the subscription until it is cancelled."""
        if self._subscription is None:
            raise RuntimeError("LiveContentBinding.start() must be called before run()")
        async for change in self._subscription:
            await self.apply(change)

    async def close(self) -> None:
        if self._subscription is not None:
            await self._subscription.cancel()
            self._subscription = None
        self.state = BindingState.CLOSED
