"""
ContentView
-----------
Scrollable main region: the header card followed by one card per item, in
the order given by the layout. When the layout is empty an empty-state label
is shown below the header. This is a pure View with a single public setter,
``apply(layout)``; rebuilding is skipped when the layout did not change.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from intern.app.render import ContentLayout, ContentRow


class ContentView(ttk.Frame):
    """Header + items list with an explicit empty state."""

    def __init__(self, parent: tk.Misc, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, borderwidth=0)
        vbar = ttk.Scrollbar(self, orient="vertical", command=self._canvas.yview)
        self._canvas.configure(yscrollcommand=vbar.set)
        self._canvas.grid(row=0, column=0, sticky="nsew")
        vbar.grid(row=0, column=1, sticky="ns")

        self._inner = ttk.Frame(self._canvas)
        self._inner.columnconfigure(0, weight=1)
        self._inner_id = self._canvas.create_window((0, 0), window=self._inner, anchor="nw")
        self._inner.bind("<Configure>", lambda e: self._canvas.configure(scrollregion=self._canvas.bbox("all")))
        self._canvas.bind("<Configure>", self._on_canvas_configure)

        self._layout: Optional[ContentLayout] = None
        self._row_frames: List[ttk.Frame] = []
        self.empty_label: Optional[ttk.Label] = None

    # ------------------------------------------------------------------
    def apply(self, layout: ContentLayout) -> None:
        if layout == self._layout:
            return
        self._layout = layout
        self._rebuild(layout)

    @property
    def row_titles(self) -> List[str]:
        """Titles of the rendered cards, top to bottom."""
        if self._layout is None:
            return []
        return [row.title for row in self._layout.rows]

    @property
    def shows_empty_state(self) -> bool:
        return self.empty_label is not None

    # ------------------------------------------------------------------
    def _rebuild(self, layout: ContentLayout) -> None:
        for child in list(self._inner.winfo_children()):
            child.destroy()
        self._row_frames.clear()
        self.empty_label = None

        grid_row = 0
        for row in layout.rows:
            card = self._build_card(row)
            card.grid(row=grid_row, column=0, sticky="ew", padx=12, pady=(10 if grid_row == 0 else 4, 4))
            self._row_frames.append(card)
            grid_row += 1

        if layout.empty_text is not None:
            self.empty_label = ttk.Label(self._inner, text=layout.empty_text, style="Empty.TLabel")
            self.empty_label.grid(row=grid_row, column=0, pady=32)

        self._canvas.yview_moveto(0)

    def _build_card(self, row: ContentRow) -> ttk.Frame:
        card = ttk.Frame(self._inner, style="Card.TFrame", padding=(12, 8))
        card.columnconfigure(0, weight=1)
        title_style = "Title.TLabel" if row.kind == "header" else "CardTitle.TLabel"
        ttk.Label(card, text=row.title, style=title_style).grid(row=0, column=0, sticky="w")
        ttk.Label(card, text=row.timestamp, style="CardSubtle.TLabel").grid(row=0, column=1, sticky="e")
        ttk.Label(card, text=row.description, style="Card.TLabel", wraplength=400, justify="left").grid(
            row=1, column=0, columnspan=2, sticky="w", pady=(4, 0)
        )
        if row.image_url:
            ttk.Label(card, text=row.image_url, style="CardSubtle.TLabel", wraplength=400).grid(
                row=2, column=0, columnspan=2, sticky="w", pady=(4, 0)
            )
        return card

    def _on_canvas_configure(self, event):
        # Keep the inner frame as wide as the canvas so cards stretch.
        self._canvas.itemconfigure(self._inner_id, width=event.width)


__all__ = ["ContentView"]
