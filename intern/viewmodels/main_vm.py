from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future
from dataclasses import replace
from typing import Callable, Optional, assert_never

from intern.domain.models import HeaderInfo
from intern.domain.ports import UseCaseError
from intern.usecases.error_mapping import DEFAULT_ERROR_MESSAGE
from .main_state import MainIntent, MainUiState
from .mappers import HeaderUiModelMapper, ItemUiModelMapper
from .state_flow import StateFlow

LoadHeaderInfoFn = Callable[[], HeaderInfo]


class MainVM:
    """Owns the main screen state and reacts to ``MainIntent`` values.

    The loader runs on ``executor`` when one is given, otherwise inline on
    the caller's thread. Results are published through ``ui_state``.
    """

    def __init__(
        self,
        load_header_info: LoadHeaderInfoFn,
        *,
        executor: Optional[Executor] = None,
        header_mapper: Optional[HeaderUiModelMapper] = None,
        item_mapper: Optional[ItemUiModelMapper] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self._load_header_info = load_header_info
        self._executor = executor
        self._header_mapper = header_mapper or HeaderUiModelMapper()
        self._item_mapper = item_mapper or ItemUiModelMapper()

        self.ui_state: StateFlow[MainUiState] = StateFlow(MainUiState())

        self._lock = threading.Lock()
        self._in_flight = False
        self._closed = False

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def accept_intent(self, intent: MainIntent) -> None:
        self._log.debug("Intent received: %s", intent)
        if intent is MainIntent.REFRESH_SCREEN:
            self.refresh()
        elif intent is MainIntent.HIDE_ERROR_MESSAGE:
            self.hide_error_message()
        else:
            assert_never(intent)

    def refresh(self) -> None:
        """Start loading unless a load is already running or the VM is closed."""
        with self._lock:
            if self._closed:
                return
            if self._in_flight:
                self._log.debug("Refresh ignored; load already in flight")
                return
            self._in_flight = True

        self.ui_state.update(lambda state: replace(state, is_loading=True))
        if self._executor is None:
            self._load()
            return
        future = self._executor.submit(self._load)
        future.add_done_callback(self._on_load_done)

    def hide_error_message(self) -> None:
        self._publish(lambda state: replace(state, error_message=None))

    def close(self) -> None:
        """Stop publishing; results of a load still running are discarded."""
        with self._lock:
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _load(self) -> None:
        try:
            header_info = self._load_header_info()
            header = self._header_mapper.to_ui_model(header_info)
            items = self._item_mapper.to_ui_models(header_info.items)
        except UseCaseError as err:
            self._log.info("Load failed (%s): %s", err.code, err.message)
            self._publish(
                lambda state: replace(state, is_loading=False, error_message=err.message)
            )
        except Exception:
            self._log.exception("Header load crashed")
            self._publish(_failed)
        else:
            self._publish(
                lambda state: MainUiState(
                    is_loading=False,
                    error_message=None,
                    header=header,
                    items=items,
                )
            )
        finally:
            with self._lock:
                self._in_flight = False

    def _publish(self, fn: Callable[[MainUiState], MainUiState]) -> None:
        with self._lock:
            if self._closed:
                self._log.debug("Dropping state update; view model closed")
                return
        self.ui_state.update(fn)

    def _on_load_done(self, future: Future) -> None:
        # ``_load`` handles its own errors; this only sees BaseExceptions.
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            self._log.error("Header load aborted", exc_info=exc)
            self._publish(_failed)


def _failed(state: MainUiState) -> MainUiState:
    return replace(state, is_loading=False, error_message=DEFAULT_ERROR_MESSAGE)


__all__ = ["MainVM"]
