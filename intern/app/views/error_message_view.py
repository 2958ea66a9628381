"""Snackbar-style error region with a dismiss action.

Visibility is driven by state only: the parent screen shows this frame while
a message is present and hides it once the state owner clears the message.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from intern.app.render import ErrorMessageLayout
from .view_utils import safe_call


class ErrorMessageView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Misc,
        *,
        on_hide_error_message: Optional[Callable[[], None]] = None,
        **kwargs,
    ) -> None:
        super().__init__(parent, style="Snackbar.TFrame", **kwargs)
        self.on_hide_error_message = on_hide_error_message
        self.columnconfigure(0, weight=1)

        self._message_var = tk.StringVar(value="")
        ttk.Label(
            self,
            textvariable=self._message_var,
            style="Snackbar.TLabel",
            wraplength=360,
            justify="left",
        ).grid(row=0, column=0, sticky="w", padx=(12, 6), pady=10)
        self.btn_dismiss = ttk.Button(
            self, text="Dismiss", style="Snackbar.TButton", command=self._on_dismiss_click
        )
        self.btn_dismiss.grid(row=0, column=1, padx=(6, 8), pady=6)

    def apply(self, layout: Optional[ErrorMessageLayout]) -> None:
        self._message_var.set(layout.text if layout is not None else "")

    @property
    def message(self) -> str:
        return self._message_var.get()

    def _on_dismiss_click(self) -> None:
        safe_call(self.on_hide_error_message)


__all__ = ["ErrorMessageView"]
