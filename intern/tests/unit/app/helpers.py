from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from intern.app.render import MainScreenLayout


class ManualScheduler:
    """Stand-in for Tk ``after``/``after_cancel`` that runs only when told to."""

    def __init__(self) -> None:
        self._counter = 0
        self.pending: Dict[str, Tuple[int, Callable[[], None]]] = {}
        self.cancelled: List[str] = []

    def after(self, delay_ms: int, callback: Callable[[], None]) -> str:
        self._counter += 1
        token = f"after#{self._counter}"
        self.pending[token] = (delay_ms, callback)
        return token

    def after_cancel(self, token: str) -> None:
        self.cancelled.append(token)
        self.pending.pop(token, None)

    def run_pending(self) -> int:
        """Run the callbacks scheduled so far (not the ones they schedule)."""
        batch = list(self.pending.items())
        for token, _ in batch:
            self.pending.pop(token, None)
        for _, (_, callback) in batch:
            callback()
        return len(batch)


class RecordingScreenView:
    """ScreenView double that stores every applied layout."""

    def __init__(self) -> None:
        self.on_refresh: Optional[Callable[[], None]] = None
        self.on_hide_error_message: Optional[Callable[[], None]] = None
        self.layouts: List[MainScreenLayout] = []

    def apply_layout(self, layout: MainScreenLayout) -> None:
        self.layouts.append(layout)


__all__ = ["ManualScheduler", "RecordingScreenView"]
