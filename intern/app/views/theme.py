"""Shared visual theme for the intern desktop views.

The module centralizes ttk style tokens so all views render a cohesive look
without carrying styling logic in each individual view class.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BG = "#f3f5f9"
CARD_BG = "#ffffff"
BORDER = "#d9dfeb"
PRIMARY = "#0caa41"
TEXT = "#1f2937"
MUTED = "#64748b"
SNACKBAR_BG = "#323232"
SNACKBAR_TEXT = "#ffffff"


def apply_theme(root: tk.Misc) -> None:
    """Apply the ttk + tk visual theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BG)

    style.configure(".", background=BG, foreground=TEXT)
    style.configure("TFrame", background=BG)
    style.configure("TopBar.TFrame", background=CARD_BG)
    style.configure("Card.TFrame", background=CARD_BG, relief="solid", borderwidth=1, bordercolor=BORDER)
    style.configure("TLabel", background=BG, foreground=TEXT)
    style.configure("Title.TLabel", background=CARD_BG, foreground=TEXT, font=("TkDefaultFont", 14, "bold"))
    style.configure("CardTitle.TLabel", background=CARD_BG, foreground=TEXT, font=("TkDefaultFont", 12, "bold"))
    style.configure("Card.TLabel", background=CARD_BG, foreground=TEXT)
    style.configure("CardSubtle.TLabel", background=CARD_BG, foreground=MUTED)
    style.configure("Empty.TLabel", background=BG, foreground=MUTED, font=("TkDefaultFont", 11, "italic"))

    style.configure("Snackbar.TFrame", background=SNACKBAR_BG)
    style.configure("Snackbar.TLabel", background=SNACKBAR_BG, foreground=SNACKBAR_TEXT)
    style.configure(
        "Snackbar.TButton",
        background=SNACKBAR_BG,
        foreground=PRIMARY,
        bordercolor=SNACKBAR_BG,
        relief="flat",
    )
    style.map("Snackbar.TButton", background=[("active", "#454545")])

    style.configure("TButton", padding=(10, 6), background=CARD_BG, bordercolor=BORDER, relief="flat")
    style.map("TButton", background=[("active", "#eaf7ee")])
    style.configure("Horizontal.TProgressbar", background=PRIMARY, troughcolor="#e7ecf6")


__all__ = ["apply_theme"]
