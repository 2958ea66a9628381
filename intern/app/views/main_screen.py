"""
MainScreenView
--------------
Tk screen composed of three regions:
  * TopBarView (row 0, always visible)
  * ContentView (row 1, expands)
  * ErrorMessageView (row 2, only while the layout carries an error)

This file contains only View code. ``apply_layout`` is the single entry point
used by ``MainScreenBinding``; user actions leave through ``on_refresh`` and
``on_hide_error_message``.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from intern.app.render import MainScreenLayout
from .content_view import ContentView
from .error_message_view import ErrorMessageView
from .top_bar_view import TopBarView
from .view_utils import safe_call


class MainScreenView(ttk.Frame):
    """Header/list screen. ``padding`` and other frame options act as the layout modifier."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Misc,
        *,
        on_refresh: OnVoid = None,
        on_hide_error_message: OnVoid = None,
        **kwargs,
    ) -> None:
        super().__init__(parent, **kwargs)
        self.on_refresh = on_refresh
        self.on_hide_error_message = on_hide_error_message

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self.top_bar = TopBarView(self, on_refresh=lambda: safe_call(self.on_refresh))
        self.top_bar.grid(row=0, column=0, sticky="ew")

        self.content = ContentView(self)
        self.content.grid(row=1, column=0, sticky="nsew")

        self.error_message = ErrorMessageView(
            self, on_hide_error_message=lambda: safe_call(self.on_hide_error_message)
        )
        self.error_message.grid(row=2, column=0, sticky="ew", padx=12, pady=(4, 12))
        self.error_message.grid_remove()
        self._error_visible = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def apply_layout(self, layout: MainScreenLayout) -> None:
        self.top_bar.apply(layout.top_bar)
        self.content.apply(layout.content)
        self.error_message.apply(layout.error_message)
        self._set_error_visible(layout.error_message is not None)

    @property
    def error_visible(self) -> bool:
        return self._error_visible

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _set_error_visible(self, visible: bool) -> None:
        if visible == self._error_visible:
            return
        self._error_visible = visible
        if visible:
            self.error_message.grid()
        else:
            self.error_message.grid_remove()


__all__ = ["MainScreenView"]


if __name__ == "__main__":
    from intern.app.render import render_main_screen
    from intern.app.views.theme import apply_theme
    from intern.viewmodels.main_state import MainUiState
    from intern.viewmodels.ui_models import HeaderUiModel, ItemUiModel

    root = tk.Tk()
    root.title("MainScreenView Demo")
    root.geometry("480x640")
    apply_theme(root)

    screen = MainScreenView(root, padding=4)
    screen.pack(fill="both", expand=True)
    screen.on_refresh = lambda: print("[demo] refresh requested")
    screen.on_hide_error_message = lambda: print("[demo] dismiss requested")

    screen.apply_layout(
        render_main_screen(
            MainUiState(
                error_message="An error occurred",
                header=HeaderUiModel(
                    id=1,
                    title="Sample Title",
                    description="Sample Description",
                    timestamp="Jun 23, 2023",
                ),
                items=(
                    ItemUiModel("Libra", "Description 1", "https://example.org/libra.png", "Jun 23, 2023"),
                    ItemUiModel("Sagittarius", "Description 2", "https://example.org/sgr.png", "Jun 23, 2023"),
                ),
            )
        )
    )
    root.mainloop()
