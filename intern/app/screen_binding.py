"""Connects ``MainVM.ui_state`` to a main screen view and routes its intents.

Call context:
    ``intern.app.main.App`` creates one binding per screen, calls ``start``
    once the Tk root exists and ``close`` from the window-close handler.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Protocol, Tuple

from intern.viewmodels.main_state import MainIntent, MainUiState
from intern.viewmodels.main_vm import MainVM
from intern.viewmodels.state_flow import Subscription
from .intent_channel import IntentChannel
from .render import DEFAULT_TITLE, MainScreenLayout, render_main_screen
from .ui_dispatcher import UiDispatcher

PUMP_KEY = "render"


class ScreenView(Protocol):
    on_refresh: Optional[Callable[[], None]]
    on_hide_error_message: Optional[Callable[[], None]]

    def apply_layout(self, layout: MainScreenLayout) -> None: ...


class MainScreenBinding:
    """Render the latest ``MainUiState`` and send view actions as intents.

    States emitted on the UI thread render synchronously. States emitted on
    other threads are kept as a single pending value that the next pump tick
    renders, so intermediate states may be skipped but the newest one is
    always shown. Nothing older than the last rendered state is ever drawn.
    """

    def __init__(
        self,
        vm: MainVM,
        view: ScreenView,
        dispatcher: UiDispatcher,
        *,
        title: str = DEFAULT_TITLE,
        render_interval_ms: int = 50,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self._vm = vm
        self._view = view
        self._dispatcher = dispatcher
        self._title = title
        self._interval_ms = max(1, int(render_interval_ms))

        self.intents = IntentChannel(vm.accept_intent, dispatcher)
        view.on_refresh = lambda: self.intents.send(MainIntent.REFRESH_SCREEN)
        view.on_hide_error_message = lambda: self.intents.send(MainIntent.HIDE_ERROR_MESSAGE)

        self._lock = threading.Lock()
        self._seq = 0
        self._pending: Optional[Tuple[int, MainUiState]] = None
        self._rendered_seq = 0
        self._ui_thread: Optional[int] = None
        self._subscription: Optional[Subscription] = None
        self._closed = False

        self.last_state: Optional[MainUiState] = None
        self.last_layout: Optional[MainScreenLayout] = None
        self.render_count = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Subscribe on the calling (UI) thread and start the render pump."""
        if self._closed:
            raise RuntimeError("MainScreenBinding cannot be restarted after close().")
        if self._subscription is not None:
            return
        self._ui_thread = threading.get_ident()
        self._subscription = self._vm.ui_state.subscribe(self._on_state)
        self._schedule_pump()

    def close(self) -> None:
        """Stop rendering and delivering intents. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._subscription is not None:
            self._subscription.cancel()
        self.intents.close()
        self._dispatcher.cancel(PUMP_KEY)
        with self._lock:
            self._pending = None
        self._log.debug("Screen binding closed after %d renders", self.render_count)

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def flush(self) -> bool:
        """Render the pending state if it is newer than the last render."""
        if self._closed:
            return False
        with self._lock:
            pending = self._pending
            self._pending = None
        if pending is None:
            return False
        seq, state = pending
        if seq <= self._rendered_seq:
            return False
        self._rendered_seq = seq
        return self._render(state)

    def _on_state(self, state: MainUiState) -> None:
        if self._closed:
            return
        with self._lock:
            self._seq += 1
            self._pending = (self._seq, state)
        if threading.get_ident() == self._ui_thread:
            self.flush()

    def _render(self, state: MainUiState) -> bool:
        if state is self.last_state:
            return False
        layout = render_main_screen(state, title=self._title)
        self._view.apply_layout(layout)
        self.last_state = state
        self.last_layout = layout
        self.render_count += 1
        return True

    def _pump(self) -> None:
        if self._closed:
            return
        self.flush()
        self._schedule_pump()

    def _schedule_pump(self) -> None:
        self._dispatcher.schedule(PUMP_KEY, self._interval_ms, self._pump)


__all__ = ["MainScreenBinding", "PUMP_KEY", "ScreenView"]
