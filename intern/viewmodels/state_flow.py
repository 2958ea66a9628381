"""Replay-latest state holder shared between a view model and its views.

Call context:
    ``MainVM`` owns a ``StateFlow[MainUiState]`` and updates it from the UI
    thread or from executor threads. ``MainScreenBinding`` subscribes to it and
    cancels the subscription when the screen is torn down.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable, Deque, Generic, List, Tuple, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]

log = logging.getLogger(__name__)


class Subscription:
    """Handle returned by ``StateFlow.subscribe``; ``cancel`` is idempotent."""

    def __init__(self, flow: "StateFlow", listener: Listener) -> None:
        self._flow = flow
        self._listener = listener
        self._active = True
        self._last_version = -1

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._flow._remove(self)

    def _deliver(self, version: int, value) -> None:
        # Versions only move forward per subscriber.
        if not self._active or version <= self._last_version:
            return
        self._last_version = version
        self._listener(value)


class StateFlow(Generic[T]):
    """Hot observable holding exactly one current value.

    New subscribers receive the current value immediately. Values equal to
    the current one are not re-emitted. Emission and delivery happen under
    one re-entrant lock. A value emitted by a listener while another value is
    being delivered is queued and delivered to every subscriber afterwards,
    so all listeners see values in production order and end on the latest.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._version = 0
        self._lock = threading.RLock()
        self._subscriptions: List[Subscription] = []
        self._queue: Deque[Tuple[int, T]] = deque()
        self._delivering = False

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    def emit(self, value: T) -> None:
        with self._lock:
            if value == self._value:
                return
            self._set(value)

    def update(self, fn: Callable[[T], T]) -> T:
        """Atomically replace the value with ``fn(current)`` and return it."""
        with self._lock:
            new_value = fn(self._value)
            if new_value != self._value:
                self._set(new_value)
            return self._value

    def subscribe(self, listener: Listener) -> Subscription:
        subscription = Subscription(self, listener)
        with self._lock:
            self._subscriptions.append(subscription)
            self._safe_deliver(subscription, self._version, self._value)
        return subscription

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _set(self, value: T) -> None:
        self._version += 1
        self._value = value
        self._queue.append((self._version, value))
        if self._delivering:
            return
        self._delivering = True
        try:
            while self._queue:
                version, queued = self._queue.popleft()
                for subscription in list(self._subscriptions):
                    self._safe_deliver(subscription, version, queued)
        finally:
            self._delivering = False

    @staticmethod
    def _safe_deliver(subscription: Subscription, version: int, value) -> None:
        try:
            subscription._deliver(version, value)
        except Exception:
            log.exception("State listener failed")

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)


__all__ = ["StateFlow", "Subscription"]
