"""Subject: a push-based observable that remembers its latest value.

New subscribers get the current value immediately, then every later change.
Publishing a value equal to the current one is dropped, so re-applying the
same state never wakes subscribers.

Two ways to consume a Subject:

    subscription = subject.subscribe(callback)   # callback-style
    ...
    subscription.unsubscribe()

    async for value in subject.stream():         # lazy async sequence
        ...                                      # unsubscribes on cancel/close
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import AsyncIterator, Callable, Generic, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Handle returned by Subject.subscribe()."""

    def __init__(self, subject: Subject, sub_id: int) -> None:
        self._subject = subject
        self._sub_id = sub_id

    @property
    def active(self) -> bool:
        return self._subject is not None

    def unsubscribe(self) -> None:
        """Stop receiving values. Safe to call more than once."""
        if self._subject is not None:
            self._subject._remove(self._sub_id)
            self._subject = None

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info) -> None:
        self.unsubscribe()


class Subject(Generic[T]):
    """Holds the latest value and notifies subscribers on change."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: dict[int, Callable[[T], None]] = {}
        self._ids = itertools.count()

    @property
    def value(self) -> T:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, value: T) -> bool:
        """Set a new value and notify subscribers.

        Returns False (and notifies nobody) if value equals the current one.
        """
        if value == self._value:
            return False
        self._value = value
        for sub_id, callback in list(self._subscribers.items()):
            if sub_id not in self._subscribers:
                continue  # Unsubscribed by an earlier callback
            try:
                callback(value)
            except Exception:
                log.exception("Subject subscriber raised")
        return True

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        """Register a callback and replay the current value to it."""
        sub_id = next(self._ids)
        self._subscribers[sub_id] = callback
        callback(self._value)
        return Subscription(self, sub_id)

    def _remove(self, sub_id: int) -> None:
        self._subscribers.pop(sub_id, None)

    async def stream(self) -> AsyncIterator[T]:
        """Yield the current value, then each change, until cancelled."""
        queue: asyncio.Queue[T] = asyncio.Queue()
        subscription = self.subscribe(queue.put_nowait)
        try:
            while True:
                yield await queue.get()
        finally:
            subscription.unsubscribe()
