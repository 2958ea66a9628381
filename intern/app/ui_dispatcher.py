"""Keyed timer registry that runs callbacks on the UI thread.

The composition layer passes Tk ``after`` and ``after_cancel`` callables (or
their event-loop equivalents for the web runtime) into this class so timer
state is tracked in one place and can be canceled safely when a screen is
torn down or the app closes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

ScheduleFn = Callable[[int, Callable[[], None]], Any]
CancelFn = Callable[[Any], None]

log = logging.getLogger(__name__)


@dataclass
class TimerHandle:
    """Timer token associated with a single channel.

    Attributes:
        key: Channel key (for example ``render`` or ``intents``).
        token: Scheduler token returned by the UI scheduler implementation.
    """
    key: str
    token: Any


class UiDispatcher:
    """Manage keyed timers using a UI scheduler (for example Tk)."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions and initialize the handle registry.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
        """
        self._schedule = schedule
        self._cancel = cancel
        self._handles: Dict[str, TimerHandle] = {}
        self._closed = False

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        """Schedule or reschedule ``callback`` for a channel.

        Args:
            key: Channel key.
            delay_ms: Delay in milliseconds before callback execution.
            callback: Callback to run on the UI thread.
        """
        if self._closed:
            log.debug("Dispatcher closed; not scheduling %s", key)
            return
        delay = max(1, int(delay_ms))
        self.cancel(key)

        def _fire() -> None:
            handle = self._handles.get(key)
            if handle is not None and handle.token == token:
                del self._handles[key]
            callback()

        token = self._schedule(delay, _fire)
        self._handles[key] = TimerHandle(key=key, token=token)

    def is_scheduled(self, key: str) -> bool:
        return key in self._handles

    def cancel(self, key: str) -> None:
        """Cancel a pending callback for a channel.

        Args:
            key: Channel key to cancel.
        """
        handle = self._handles.pop(key, None)
        if not handle:
            return
        try:
            self._cancel(handle.token)
        except Exception as exc:
            # Tk raises once the interpreter is gone; the timer is dead either way.
            log.debug("Cancel of %s failed: %s", key, exc)

    def cancel_all(self) -> None:
        """Cancel all pending callbacks across all channel keys."""
        for key in list(self._handles.keys()):
            self.cancel(key)

    def close(self) -> None:
        """Cancel everything and refuse further scheduling."""
        self.cancel_all()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed


__all__ = ["TimerHandle", "UiDispatcher"]
