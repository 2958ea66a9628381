"""Top bar: screen title, busy indicator, and the refresh action."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from intern.app.render import TopBarLayout
from .view_utils import safe_call


class TopBarView(ttk.Frame):
    """Always-visible bar. The progress bar only runs while loading."""

    def __init__(
        self,
        parent: tk.Misc,
        *,
        on_refresh: Optional[Callable[[], None]] = None,
        **kwargs,
    ) -> None:
        super().__init__(parent, style="TopBar.TFrame", **kwargs)
        self.on_refresh = on_refresh
        self.columnconfigure(0, weight=1)

        self._title_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self._title_var, style="Title.TLabel").grid(
            row=0, column=0, sticky="w", padx=(12, 6), pady=8
        )
        self.progress = ttk.Progressbar(self, mode="indeterminate", length=96)
        self.progress.grid(row=0, column=1, padx=6)
        self.progress.grid_remove()
        self.btn_refresh = ttk.Button(self, text="Refresh", command=self._on_refresh_click)
        self.btn_refresh.grid(row=0, column=2, padx=(6, 12), pady=8)

        self._is_loading = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def apply(self, layout: TopBarLayout) -> None:
        self._title_var.set(layout.title)
        self.set_loading(layout.is_loading)

    def set_loading(self, is_loading: bool) -> None:
        if is_loading == self._is_loading:
            return
        self._is_loading = is_loading
        if is_loading:
            self.progress.grid()
            self.progress.start(12)
        else:
            self.progress.stop()
            self.progress.grid_remove()

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def title(self) -> str:
        return self._title_var.get()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_refresh_click(self) -> None:
        safe_call(self.on_refresh)


__all__ = ["TopBarView"]
