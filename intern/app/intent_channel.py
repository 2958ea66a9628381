"""One-way FIFO channel carrying user intents from views to the state owner."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque

from intern.viewmodels.main_state import MainIntent
from .ui_dispatcher import UiDispatcher

DRAIN_KEY = "intents"

log = logging.getLogger(__name__)


class IntentChannel:
    """Queue intents and hand them to ``deliver`` on the next dispatcher tick.

    ``send`` never calls the state owner inline, so a click handler returns
    immediately. Intents from one channel are delivered in send order.
    """

    def __init__(self, deliver: Callable[[MainIntent], None], dispatcher: UiDispatcher) -> None:
        self._deliver = deliver
        self._dispatcher = dispatcher
        self._queue: Deque[MainIntent] = deque()
        self._closed = False

    def send(self, intent: MainIntent) -> None:
        if self._closed:
            log.debug("Intent %s dropped; channel closed", intent.name)
            return
        self._queue.append(intent)
        if not self._dispatcher.is_scheduled(DRAIN_KEY):
            self._dispatcher.schedule(DRAIN_KEY, 0, self.drain)

    def drain(self) -> int:
        """Deliver all queued intents in order; return how many were delivered."""
        delivered = 0
        while self._queue and not self._closed:
            intent = self._queue.popleft()
            try:
                self._deliver(intent)
            except Exception:
                log.exception("Handling intent %s failed", intent.name)
            delivered += 1
        return delivered

    def close(self) -> None:
        self._closed = True
        self._queue.clear()
        self._dispatcher.cancel(DRAIN_KEY)

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def closed(self) -> bool:
        return self._closed


__all__ = ["DRAIN_KEY", "IntentChannel"]
